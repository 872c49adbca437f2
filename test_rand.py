#!/usr/bin/env python3
# python 3.6+

# Randomized CONSISTENCY testing of writing vs. parsing and of differentiation vs. SymPy: ast -> prefix/postfix/rpn -> ast, ast.diff () == sympy.diff ()

from getopt import getopt
from random import random, randrange, choice, seed
import sys
import time
import unittest

import sympy as sp

from xast import AST
from xops import OPS, VARS
from xparser import parse_prefix, parse_postfix
from xrpn import parse_flat_postfix
from xsym import ast2spt, spt_diff

def term_num ():
	return AST ('#', randrange (10) if random () < 0.8 else randrange (1000))

def term_var ():
	return AST ('@', choice (VARS))

def expr_op ():
	op = choice (_OPS)

	return AST ('-op', op.sym, tuple (expr () for _ in range (op.arity)))

def expr_primitive ():
	op = choice (_PRIMITIVE_OPS)

	return AST ('-op', op.sym, tuple (expr () for _ in range (op.arity)))

#...............................................................................................
_OPS           = list (OPS.values ())
_PRIMITIVE_OPS = [op for op in _OPS if not op.expand]

EXPRS = [va [1] for va in filter (lambda va: va [0] [:5] == 'expr_', globals ().items ())]
TERMS = [va [1] for va in filter (lambda va: va [0] [:5] == 'term_', globals ().items ())]

def term ():
	return choice (TERMS) ()

def expr (depth = None):
	global DEPTH

	if depth is not None:
		DEPTH = depth

	if DEPTH <= 0 or random () < 0.2:
		return term ()

	DEPTH -= 1
	ret    = choice (EXPRS) ()
	DEPTH += 1

	return ret

def finite (ast): # every subtree and every macro expansion must have a finite SymPy value or derivatives are not comparable
	stack = [ast]

	while stack:
		ast = stack.pop ()

		if ast2spt (ast).has (sp.zoo, sp.nan, sp.oo, -sp.oo):
			return False

		if ast.is_op:
			stack.extend (ast.expanded.args)

	return True

#...............................................................................................
def run (argv = None):
	_DEPTH  = 3
	count   = 100
	opts, _ = getopt (sys.argv [1:] if argv is None else argv, 'c:d:s:i', ['count=', 'depth=', 'seed=', 'inf', 'infinite', 'show', 'nodiff'])

	for opt, arg in opts:
		if opt in ('-c', '--count'):
			count = int (arg)
		elif opt in ('-d', '--depth'):
			_DEPTH = int (arg)
		elif opt in ('-s', '--seed'):
			seed (int (arg))

	show     = ('--show', '') in opts
	dodiff   = ('--nodiff', '') not in opts
	infinite = (('-i', '') in opts or ('--inf', '') in opts or ('--infinite', '') in opts)
	status   = []

	try:
		while infinite or count > 0:
			count  -= 1
			status  = []
			ast     = expr (_DEPTH)

			if show:
				print (f'{ast.prefix}\n')

			status.append (f'ast:     {ast!r}')

			for rep, parse in (('prefix', parse_prefix), ('postfix', parse_postfix), ('rpn', parse_flat_postfix)):
				text = getattr (ast, rep)

				status.extend (['', f'{rep}: {" " * (7 - len (rep))}{text}'])

				if parse (text) != ast:
					raise ValueError (f"{rep} doesn't match")

				del status [-2:]

			if not dodiff or not finite (ast):
				continue

			for var in VARS:
				d = ast.diff (var)

				status.extend (['', f'diff {var}:  {d.prefix}'])

				if parse_prefix (d.prefix) != d:
					raise ValueError ("derivative prefix doesn't match")

				t0  = time.process_time ()
				ok  = sp.cancel (ast2spt (d) - spt_diff (ast, var)) == 0
				t   = time.process_time () - t0

				if t > 2:
					print (f'Slow compare {t}s: \n{ast.prefix}', file = sys.stderr)

				if not ok:
					raise ValueError ("derivative doesn't match SymPy")

				del status [-2:]

	except KeyboardInterrupt:
		pass

	except Exception:
		print ('Exception!\n')
		print ('\n'.join (status))
		print ()

		raise

	return True

class Test (unittest.TestCase):
	def test_random (self):
		self.assertTrue (run (['-c', '40', '-d', '2', '-s', '0']))

if __name__ == '__main__':
	run ()
