# Convert expression tree to SymPy expression.

import sympy as sp

class ast2spt: # expression tree -> sympy tree (expression)
	def __new__ (cls, ast):
		self = super ().__new__ (cls)

		return self._ast2spt (ast)

	def _ast2spt (self, ast):
		return self._ast2spt_funcs [ast.op] (self, ast)

	def _ast2spt_num (self, ast):
		return sp.Integer (ast.num) if isinstance (ast.num, int) else sp.Float (ast.num)

	def _ast2spt_op (self, ast):
		func = self._ast2spt_ops.get (ast.sym)

		if func is None: # macro operation, translate primitive equivalent
			return self._ast2spt (ast.expanded)

		return func (*(self._ast2spt (a) for a in ast.args))

	_ast2spt_ops = {
		'+'     : lambda a, b: sp.Add (a, b),
		'-'     : lambda a, b: sp.Add (a, -b),
		'*'     : lambda a, b: sp.Mul (a, b),
		'/'     : lambda a, b: sp.Mul (a, sp.Pow (b, -1)),
		'negate': lambda a: -a,
	}

	_ast2spt_funcs = {
		'#'  : _ast2spt_num,
		'@'  : lambda self, ast: sp.Symbol (ast.var),
		'-op': _ast2spt_op,
	}

def spt_diff (ast, var): # reference derivative computed by SymPy
	return sp.diff (ast2spt (ast), sp.Symbol (var))
