"""
This file aggregates the exception types and configuration records shared across gqlvars.

Two kinds of trouble are worth telling apart. Mistakes in a grammar table, a
lexicon, or a mode registration are programming errors: they raise one of the
exceptions below, and they raise early. Mistakes in the text being edited are
not errors at all as far as the caller is concerned: the parser marks them with
the `invalid` style, tells a ParseErrorListener, and carries on.
"""

from typing import NamedTuple

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """

class UndefinedSubexpression(LanguageError):
	""" A lexical pattern mentioned {name} before any `let(name, ...)`. """
	def __init__(self, name, pattern):
		super().__init__(name, pattern)
		self.name, self.pattern = name, pattern

class UnknownRule(LanguageError):
	""" A grammar table refers to a rule it does not define. """
	def __init__(self, rule_name):
		super().__init__(rule_name)
		self.rule_name = rule_name

class UnknownMode(LanguageError):
	""" Nothing was registered under the requested mode name. """

class EditorConfig(NamedTuple):
	"""
	What the host editor tells a mode about its settings.
	tab_size: columns per tab stop, used to measure a line's indentation.
	indent_unit: columns per nesting level, used when computing indentation.
	use_tabs: whether the editor fills indentation with tabs; it does not change the computed column.
	"""
	tab_size: int = 2
	indent_unit: int = 2
	use_tabs: bool = False
