# Base classes for expression syntax tree, tuple based.
#
# ('#', num)                    - integer (or float) constant
# ('@', 'var')                  - reference to one of the positional variables 'x', 'y' or 'z'
# ('-op', 'sym', (a1, a2, ...)) - operation 'sym' from the registry applied to arguments, count must match arity

from xops import OPS, VARS, to_float
from xlex import InvalidOperation, ArityMismatch, InvalidVariableName

#...............................................................................................
class AST (tuple):
	op      = None

	OPS     = set () # these will be filled in after all classes defined

	_OP2CLS = {}
	_CLS2OP = {}

	def __new__ (cls, *args, **kw):
		op       = AST._CLS2OP.get (cls)
		cls_args = tuple (AST (*arg) if arg.__class__ is tuple else arg for arg in args)

		if op:
			args = (op,) + cls_args

		elif args:
			args = cls_args

			cls2 = AST._OP2CLS.get (args [0]) if args [0].__class__ is str else None # never hash child trees

			if cls2:
				cls      = cls2
				cls_args = cls_args [1:]

		self = tuple.__new__ (cls, args)

		if self.op:
			self._init (*cls_args)

		if kw:
			self.__dict__.update (kw)

		return self

	def __getattr__ (self, name): # calculate value for nonexistent self.name by calling self._name () and store
		func                 = getattr (self, f'_{name}') if name [0] != '_' else None
		val                  = func and func ()
		self.__dict__ [name] = val

		return val

	def __str__ (self):
		return self.rpn if self.op else tuple.__repr__ (self)

	def _len (self):
		return len (self)

	def _free_vars (self): # set of variable names referenced anywhere in tree
		vars  = set ()
		stack = [self]

		while stack:
			ast = stack.pop ()

			if ast.is_var:
				vars.add (ast.var)
			elif ast.is_op:
				stack.extend (ast.args)

		return vars

	def walk (self, leaf, op): # post-order fold with explicit stack, leaf (ast) -> val, op (ast, [arg vals]) -> val
		vals  = []
		stack = [(self, False)]

		while stack:
			ast, done = stack.pop ()

			if not ast.is_op:
				vals.append (leaf (ast))

			elif done:
				n    = len (ast.args)
				args = vals [-n:]

				del vals [-n:]

				vals.append (op (ast, args))

			else:
				stack.append ((ast, True))
				stack.extend ((a, False) for a in reversed (ast.args))

		return vals [0]

	@staticmethod
	def register_AST (cls):
		AST._CLS2OP [cls]    = cls.op
		AST._OP2CLS [cls.op] = cls

		AST.OPS.add (cls.op)

		setattr (AST, cls.__name__ [4:], cls)

#...............................................................................................
class AST_Num (AST):
	op, is_num = '#', True

	def _init (self, num):
		self.num = num

	def evaluate (self, x, y, z):
		return self.value

	def diff (self, var):
		return AST.Zero

	_value                    = lambda self: to_float (self.num)
	_prefix = _postfix = _rpn = lambda self: str (self.num)

class AST_Var (AST):
	op, is_var = '@', True

	def _init (self, var):
		if var not in VARS:
			raise InvalidVariableName (None, var)

		self.var = var

	def evaluate (self, x, y, z):
		return (x, y, z) [self.idx]

	def diff (self, var):
		return AST.One if var == self.var else AST.Zero

	_idx                      = lambda self: VARS.index (self.var)
	_prefix = _postfix = _rpn = lambda self: self.var

class AST_Op (AST):
	op, is_op = '-op', True

	def _init (self, sym, args):
		opdef = OPS.get (sym)

		if opdef is None:
			raise InvalidOperation (None, sym, f'unknown operation {sym!r}')

		if len (args) != opdef.arity:
			raise ArityMismatch (None, sym, opdef.arity, len (args))

		self.sym, self.args, self.opdef = sym, args, opdef

	def evaluate (self, x, y, z):
		return self.walk (lambda ast: ast.evaluate (x, y, z), lambda ast, vals: ast.opdef.eval (*vals))

	def diff (self, var): # derivatives of operation subtrees are computed bottom up and cached so the rules' child.diff () calls never nest
		diff = self.diffs.get (var)

		if diff is not None:
			return diff

		stack = [self]

		while stack:
			ast     = stack [-1]
			pending = [a for a in ast.dargs if a.is_op and var not in a.diffs]

			if pending:
				stack.extend (pending)
				continue

			stack.pop ()

			if var not in ast.diffs:
				ast.diffs [var] = \
						ast.expanded.diffs [var] \
						if ast.opdef.expand else \
						AST (*ast.opdef.diff (var, *ast.args))

		return self.diffs [var]

	_diffs    = lambda self: {}
	_dargs    = lambda self: (self.expanded,) if self.opdef.expand else self.args # macro operation, differentiate primitive equivalent
	_expanded = lambda self: AST (*self.opdef.expand (*self.args)) if self.opdef.expand else self
	_prefix   = lambda self: self.walk (lambda ast: ast.prefix, lambda ast, s: f'({ast.sym} {" ".join (s)})')
	_postfix  = lambda self: self.walk (lambda ast: ast.postfix, lambda ast, s: f'({" ".join (s)} {ast.sym})')
	_rpn      = lambda self: self.walk (lambda ast: ast.rpn, lambda ast, s: f'{" ".join (s)} {ast.sym}')

#...............................................................................................
_AST_CLASSES = [AST_Num, AST_Var, AST_Op]

for _cls in _AST_CLASSES:
	AST.register_AST (_cls)

AST.Zero = AST ('#', 0)
AST.One  = AST ('#', 1)
