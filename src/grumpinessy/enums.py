"""
Enumerations for grumpinessy.

This module defines the node-kind taxonomy of the syntax trees consumed by the
checks, and the member categories used by the member ordering check.
"""

from enum import Enum


class TokenType(str, Enum):
  """
  Kinds of syntax nodes.

  The names follow the Checkstyle `TokenTypes` vocabulary so that trees
  produced by external parsers can be serialized with their kinds verbatim.

  Kind names outside this vocabulary (for instance from a newer grammar) are
  still accepted: `TokenType("SOME_KIND")` yields an opaque pseudo-member that
  no check subscribes to.
  """

  COMPILATION_UNIT = "COMPILATION_UNIT"
  EOF = "EOF"
  PACKAGE_DEF = "PACKAGE_DEF"
  IMPORT = "IMPORT"
  STATIC_IMPORT = "STATIC_IMPORT"
  ANNOTATIONS = "ANNOTATIONS"
  ANNOTATION = "ANNOTATION"
  ANNOTATION_MEMBER_VALUE_PAIR = "ANNOTATION_MEMBER_VALUE_PAIR"
  ANNOTATION_ARRAY_INIT = "ANNOTATION_ARRAY_INIT"
  AT = "AT"

  # Declarations
  CLASS_DEF = "CLASS_DEF"
  INTERFACE_DEF = "INTERFACE_DEF"
  ANNOTATION_DEF = "ANNOTATION_DEF"
  ANNOTATION_FIELD_DEF = "ANNOTATION_FIELD_DEF"
  ENUM_DEF = "ENUM_DEF"
  RECORD_DEF = "RECORD_DEF"
  OBJBLOCK = "OBJBLOCK"
  ENUM_CONSTANT_DEF = "ENUM_CONSTANT_DEF"
  INSTANCE_INIT = "INSTANCE_INIT"
  STATIC_INIT = "STATIC_INIT"
  CTOR_DEF = "CTOR_DEF"
  COMPACT_CTOR_DEF = "COMPACT_CTOR_DEF"
  METHOD_DEF = "METHOD_DEF"
  VARIABLE_DEF = "VARIABLE_DEF"
  PARAMETERS = "PARAMETERS"
  PARAMETER_DEF = "PARAMETER_DEF"
  RECORD_COMPONENTS = "RECORD_COMPONENTS"
  RECORD_COMPONENT_DEF = "RECORD_COMPONENT_DEF"
  MODIFIERS = "MODIFIERS"
  TYPE = "TYPE"
  ARRAY_DECLARATOR = "ARRAY_DECLARATOR"
  EXTENDS_CLAUSE = "EXTENDS_CLAUSE"
  IMPLEMENTS_CLAUSE = "IMPLEMENTS_CLAUSE"
  PERMITS_CLAUSE = "PERMITS_CLAUSE"
  LITERAL_THROWS = "LITERAL_THROWS"
  TYPE_ARGUMENTS = "TYPE_ARGUMENTS"
  TYPE_ARGUMENT = "TYPE_ARGUMENT"
  TYPE_PARAMETERS = "TYPE_PARAMETERS"
  TYPE_PARAMETER = "TYPE_PARAMETER"
  TYPE_UPPER_BOUNDS = "TYPE_UPPER_BOUNDS"
  TYPE_LOWER_BOUNDS = "TYPE_LOWER_BOUNDS"
  TYPE_EXTENSION_AND = "TYPE_EXTENSION_AND"
  WILDCARD_TYPE = "WILDCARD_TYPE"
  GENERIC_START = "GENERIC_START"
  GENERIC_END = "GENERIC_END"
  ELLIPSIS = "ELLIPSIS"

  # Modifiers and keywords
  LITERAL_STATIC = "LITERAL_STATIC"
  LITERAL_PUBLIC = "LITERAL_PUBLIC"
  LITERAL_PROTECTED = "LITERAL_PROTECTED"
  LITERAL_PRIVATE = "LITERAL_PRIVATE"
  LITERAL_TRANSIENT = "LITERAL_TRANSIENT"
  LITERAL_NATIVE = "LITERAL_NATIVE"
  LITERAL_SYNCHRONIZED = "LITERAL_SYNCHRONIZED"
  LITERAL_VOLATILE = "LITERAL_VOLATILE"
  LITERAL_DEFAULT = "LITERAL_DEFAULT"
  LITERAL_SEALED = "LITERAL_SEALED"
  LITERAL_NON_SEALED = "LITERAL_NON_SEALED"
  LITERAL_PERMITS = "LITERAL_PERMITS"
  FINAL = "FINAL"
  ABSTRACT = "ABSTRACT"
  STRICTFP = "STRICTFP"
  LITERAL_CLASS = "LITERAL_CLASS"
  LITERAL_INTERFACE = "LITERAL_INTERFACE"
  LITERAL_RECORD = "LITERAL_RECORD"
  ENUM = "ENUM"

  # Primitive types
  LITERAL_VOID = "LITERAL_VOID"
  LITERAL_BOOLEAN = "LITERAL_BOOLEAN"
  LITERAL_BYTE = "LITERAL_BYTE"
  LITERAL_CHAR = "LITERAL_CHAR"
  LITERAL_SHORT = "LITERAL_SHORT"
  LITERAL_INT = "LITERAL_INT"
  LITERAL_FLOAT = "LITERAL_FLOAT"
  LITERAL_LONG = "LITERAL_LONG"
  LITERAL_DOUBLE = "LITERAL_DOUBLE"

  # Statements
  SLIST = "SLIST"
  EMPTY_STAT = "EMPTY_STAT"
  LABELED_STAT = "LABELED_STAT"
  LITERAL_IF = "LITERAL_IF"
  LITERAL_ELSE = "LITERAL_ELSE"
  LITERAL_FOR = "LITERAL_FOR"
  LITERAL_WHILE = "LITERAL_WHILE"
  LITERAL_DO = "LITERAL_DO"
  DO_WHILE = "DO_WHILE"
  LITERAL_BREAK = "LITERAL_BREAK"
  LITERAL_CONTINUE = "LITERAL_CONTINUE"
  LITERAL_RETURN = "LITERAL_RETURN"
  LITERAL_THROW = "LITERAL_THROW"
  LITERAL_YIELD = "LITERAL_YIELD"
  LITERAL_ASSERT = "LITERAL_ASSERT"
  LITERAL_SWITCH = "LITERAL_SWITCH"
  LITERAL_CASE = "LITERAL_CASE"
  CASE_GROUP = "CASE_GROUP"
  SWITCH_RULE = "SWITCH_RULE"
  LITERAL_WHEN = "LITERAL_WHEN"
  LITERAL_TRY = "LITERAL_TRY"
  LITERAL_CATCH = "LITERAL_CATCH"
  LITERAL_FINALLY = "LITERAL_FINALLY"
  RESOURCE_SPECIFICATION = "RESOURCE_SPECIFICATION"
  RESOURCES = "RESOURCES"
  RESOURCE = "RESOURCE"
  FOR_INIT = "FOR_INIT"
  FOR_CONDITION = "FOR_CONDITION"
  FOR_ITERATOR = "FOR_ITERATOR"
  FOR_EACH_CLAUSE = "FOR_EACH_CLAUSE"
  SUPER_CTOR_CALL = "SUPER_CTOR_CALL"
  CTOR_CALL = "CTOR_CALL"

  # Expressions
  EXPR = "EXPR"
  ELIST = "ELIST"
  METHOD_CALL = "METHOD_CALL"
  METHOD_REF = "METHOD_REF"
  LITERAL_NEW = "LITERAL_NEW"
  ARRAY_INIT = "ARRAY_INIT"
  INDEX_OP = "INDEX_OP"
  TYPECAST = "TYPECAST"
  LAMBDA = "LAMBDA"
  DOT = "DOT"
  IDENT = "IDENT"
  LITERAL_THIS = "LITERAL_THIS"
  LITERAL_SUPER = "LITERAL_SUPER"
  LITERAL_INSTANCEOF = "LITERAL_INSTANCEOF"
  PATTERN_VARIABLE_DEF = "PATTERN_VARIABLE_DEF"
  PATTERN_DEF = "PATTERN_DEF"
  RECORD_PATTERN_DEF = "RECORD_PATTERN_DEF"
  RECORD_PATTERN_COMPONENTS = "RECORD_PATTERN_COMPONENTS"
  UNNAMED_PATTERN_DEF = "UNNAMED_PATTERN_DEF"

  # Operators
  ASSIGN = "ASSIGN"
  PLUS_ASSIGN = "PLUS_ASSIGN"
  MINUS_ASSIGN = "MINUS_ASSIGN"
  STAR_ASSIGN = "STAR_ASSIGN"
  DIV_ASSIGN = "DIV_ASSIGN"
  MOD_ASSIGN = "MOD_ASSIGN"
  SR_ASSIGN = "SR_ASSIGN"
  BSR_ASSIGN = "BSR_ASSIGN"
  SL_ASSIGN = "SL_ASSIGN"
  BAND_ASSIGN = "BAND_ASSIGN"
  BXOR_ASSIGN = "BXOR_ASSIGN"
  BOR_ASSIGN = "BOR_ASSIGN"
  QUESTION = "QUESTION"
  LOR = "LOR"
  LAND = "LAND"
  BOR = "BOR"
  BXOR = "BXOR"
  BAND = "BAND"
  NOT_EQUAL = "NOT_EQUAL"
  EQUAL = "EQUAL"
  LT = "LT"
  GT = "GT"
  LE = "LE"
  GE = "GE"
  SL = "SL"
  SR = "SR"
  BSR = "BSR"
  PLUS = "PLUS"
  MINUS = "MINUS"
  STAR = "STAR"
  DIV = "DIV"
  MOD = "MOD"
  INC = "INC"
  DEC = "DEC"
  POST_INC = "POST_INC"
  POST_DEC = "POST_DEC"
  UNARY_MINUS = "UNARY_MINUS"
  UNARY_PLUS = "UNARY_PLUS"
  BNOT = "BNOT"
  LNOT = "LNOT"

  # Literals
  LITERAL_TRUE = "LITERAL_TRUE"
  LITERAL_FALSE = "LITERAL_FALSE"
  LITERAL_NULL = "LITERAL_NULL"
  NUM_INT = "NUM_INT"
  NUM_LONG = "NUM_LONG"
  NUM_FLOAT = "NUM_FLOAT"
  NUM_DOUBLE = "NUM_DOUBLE"
  CHAR_LITERAL = "CHAR_LITERAL"
  STRING_LITERAL = "STRING_LITERAL"
  TEXT_BLOCK_LITERAL_BEGIN = "TEXT_BLOCK_LITERAL_BEGIN"
  TEXT_BLOCK_CONTENT = "TEXT_BLOCK_CONTENT"
  TEXT_BLOCK_LITERAL_END = "TEXT_BLOCK_LITERAL_END"

  # Punctuation
  LPAREN = "LPAREN"
  RPAREN = "RPAREN"
  LCURLY = "LCURLY"
  RCURLY = "RCURLY"
  RBRACK = "RBRACK"
  COMMA = "COMMA"
  SEMI = "SEMI"
  COLON = "COLON"
  DOUBLE_COLON = "DOUBLE_COLON"
  LAMBDA_ARROW = "LAMBDA_ARROW"

  # Comments
  SINGLE_LINE_COMMENT = "SINGLE_LINE_COMMENT"
  BLOCK_COMMENT_BEGIN = "BLOCK_COMMENT_BEGIN"
  BLOCK_COMMENT_END = "BLOCK_COMMENT_END"
  COMMENT_CONTENT = "COMMENT_CONTENT"

  @classmethod
  def _missing_(cls, value):
    # Opaque kinds are cached like members so that equal names are identical.
    if not isinstance(value, str) or not value.isidentifier():
      return None
    pseudo_member = str.__new__(cls, value)
    pseudo_member._name_ = value
    pseudo_member._value_ = value
    return cls._value2member_map_.setdefault(value, pseudo_member)

  @property
  def is_known(self) -> bool:
    """True for kinds of the built-in vocabulary, False for opaque kinds."""
    return self._name_ in type(self)._member_map_


class MemberKind(str, Enum):
  """
  Syntactic category of a class body member, ignoring its static-ness.
  """

  VARIABLE = "variable"
  INITIALIZER = "initializer"
  CONSTRUCTOR = "constructor"
  METHOD = "method"
  CLASS = "class"
