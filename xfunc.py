# Closure expression evaluator: expressions are plain functions of (x, y, z), no tree, no differentiation, no text output.
# Adds positional extrema argMin / argMax which have no derivative and so are not part of the tree operation registry.

from functools import reduce

from xops import VARS, fdiv, to_float
from xrpn import reduce_words

def cnst (value):
	return lambda x, y, z: value

def variable (name):
	idx = VARS.index (name)

	return lambda x, y, z: (x, y, z) [idx]

def operation (f): # pairwise left fold of f over evaluated arguments
	return lambda *args: lambda x, y, z: reduce (f, (a (x, y, z) for a in args))

def negate (a):
	return lambda x, y, z: -a (x, y, z)

add      = operation (lambda a, b: a + b)
subtract = operation (lambda a, b: a - b)
multiply = operation (lambda a, b: a * b)
divide   = operation (fdiv)

def _argext (better): # index of first extremal value, later value wins only if strictly better
	def argext (*args):
		def f (x, y, z):
			vals = [a (x, y, z) for a in args]

			return reduce (lambda i, j: j if better (vals [j], vals [i]) else i, range (len (vals)))

		return f

	return argext

argmin = _argext (lambda a, b: a < b)
argmax = _argext (lambda a, b: a > b)

one = cnst (1)
two = cnst (2)

#...............................................................................................
OPS = {
	'+'      : (add, 2),
	'-'      : (subtract, 2),
	'*'      : (multiply, 2),
	'/'      : (divide, 2),
	'negate' : (negate, 1),
	'argMin3': (argmin, 3),
	'argMax3': (argmax, 3),
	'argMin5': (argmin, 5),
	'argMax5': (argmax, 5),
}

CONSTS = {'one': one, 'two': two}

def parse (text):
	return reduce_words (text,
		lambda word: OPS [word] [1] if word in OPS else None,
		lambda word, args: OPS [word] [0] (*args),
		lambda num: cnst (to_float (num)),
		lambda word: CONSTS.get (word) or (variable (word) if word in VARS else None))
