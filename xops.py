# Operation registry: symbol -> arity, numeric evaluator and differentiation rule.
#
# Differentiation rules receive the target variable name followed by the ORIGINAL children and return a tree in tuple form,
# ('-op', sym, (child, ...)), which the caller converts to AST. Macro operators carry no rule, only an expansion into
# primitive operators which is differentiated instead.

from collections import namedtuple
from functools import reduce
import math

VARS = ('x', 'y', 'z') # fixed positional variable slots

Op = namedtuple ('Op', 'sym arity eval diff expand')

def fdiv (a, b): # IEEE-754 division, never raises ZeroDivisionError
	try:
		return a / b

	except ZeroDivisionError:
		if a != a or a == 0:
			return math.nan

		return math.copysign (math.inf, a) * math.copysign (1, b)

def to_float (num): # integer literal -> double, magnitudes past float range become infinite
	try:
		return float (num)

	except OverflowError:
		return math.inf if num > 0 else -math.inf

def fold (f):
	return lambda *args: reduce (f, args)

def _recsum (*args):
	return reduce (lambda s, a: s + fdiv (1.0, a), args, 0)

def _recsum_tree (args): # 1/a1 + 1/a2 + ... built from primitive operators
	return reduce (lambda s, a: ('-op', '+', (s, a)), (('-op', '/', (('#', 1), a)) for a in args))

def _diff_add (v, a, b):
	return ('-op', '+', (a.diff (v), b.diff (v)))

def _diff_sub (v, a, b):
	return ('-op', '-', (a.diff (v), b.diff (v)))

def _diff_mul (v, a, b):
	return ('-op', '+', (('-op', '*', (a.diff (v), b)), ('-op', '*', (a, b.diff (v)))))

def _diff_div (v, a, b):
	return ('-op', '/', (
		('-op', '-', (('-op', '*', (a.diff (v), b)), ('-op', '*', (a, b.diff (v))))),
		('-op', '*', (b, b))))

def _diff_negate (v, a):
	return ('-op', 'negate', (a.diff (v),))

def _sumrec (n):
	return Op (f'sumrec{n}', n, _recsum, None, lambda *args: _recsum_tree (args))

def _hmean (n):
	return Op (f'hmean{n}', n, lambda *args: fdiv (n, _recsum (*args)), None, lambda *args: ('-op', '/', (('#', n), _recsum_tree (args))))

#...............................................................................................
_OPS = [
	Op ('+', 2, fold (lambda a, b: a + b), _diff_add, None),
	Op ('-', 2, fold (lambda a, b: a - b), _diff_sub, None),
	Op ('*', 2, fold (lambda a, b: a * b), _diff_mul, None),
	Op ('/', 2, fold (fdiv), _diff_div, None),
	Op ('negate', 1, lambda a: -a, _diff_negate, None),
	*(_sumrec (n) for n in range (2, 6)),
	*(_hmean (n) for n in range (2, 6)),
]

OPS      = dict ((op.sym, op) for op in _OPS)
KEYWORDS = frozenset (sym for sym in OPS if sym [0].isalpha ()) # operator names the scanner reads as letter runs

def lookup (sym):
	return OPS.get (sym)
