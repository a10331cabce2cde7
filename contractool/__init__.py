"""contractool - Contract Type IR → JSON Schema (draft-07) コンパイラ"""

__version__ = "0.1.0"
