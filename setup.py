#!/usr/bin/env python3

import setuptools

setuptools.setup (
  name                          = "xtree",
  version                       = "1.0",
  license                       = 'BSD',
  keywords                      = "expression parser prefix postfix RPN differentiation",
  description                   = "Arithmetic expression trees over x, y, z with prefix / postfix parsing, evaluation and symbolic differentiation",
  long_description              = "xtree parses fully bracketed prefix '(+ x 1)' and postfix '(x 1 +)' expressions as well as flat RPN 'x 1 +' into immutable trees. "
    "Trees can be evaluated for numeric x, y, z, differentiated symbolically with respect to any of the variables and written back out in any of the three notations. "
    "A closure based evaluator provides the same arithmetic plus positional argMin / argMax operations, and SymPy is used as a reference for derivatives.",
  long_description_content_type = "text/plain",
  py_modules                    = ['xops', 'xlex', 'xast', 'xparser', 'xrpn', 'xfunc', 'xsym'],
  classifiers                   = [
    'Intended Audience :: Education',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering :: Mathematics',
  ],
  install_requires              = ['sympy>=1.4'],
  python_requires               = '>=3.6',
)
