"""
The vocabulary in which grammar tables are written.

A grammar table maps each rule name to either a list of steps or a dispatch
function. A step is one of:
	* a Terminal, which matches (and styles) exactly one token;
	* a string, naming another rule to expand in place;
	* a Repetition, for zero or more of some rule with optional separators;
	* an Optional, for zero or one of some rule.
A dispatch function looks at the upcoming token and answers the name of the
rule to use next, or None if nothing fits.

The tables are pure data. The engine in `online` interprets them.
"""

from typing import NamedTuple, Callable, Optional as Maybe, Any

class Terminal(NamedTuple):
	style: Maybe[str]
	match: Callable[[Any], bool]
	update: Maybe[Callable[[Any, Any], None]] = None # Called with (state, token) after a match.
	text: Maybe[str] = None # The exact punctuation expected, if that is what this terminal is for.

class Repetition(NamedTuple):
	of_rule: Any
	separator: Any = None

class Optional(NamedTuple):
	of_rule: Any

def p(value:str, style=None) -> Terminal:
	""" Exactly this piece of punctuation. Unstyled unless you say otherwise. """
	return Terminal(style, lambda token: token.is_punctuation(value), text=value)

def t(kind:str, style:str) -> Terminal:
	""" Any token of the given kind. """
	return Terminal(style, lambda token: token.kind == kind)

def opt(of_rule) -> Optional: return Optional(of_rule)

def list_of(of_rule, separator=None) -> Repetition:
	"""
	Zero or more `of_rule`. Each may be followed by one `separator`,
	which is always optional whether or not it is wrapped in `opt`.
	"""
	return Repetition(of_rule, separator)

def separator_terminal(step:Repetition) -> Maybe[Terminal]:
	sep = step.separator
	return sep.of_rule if isinstance(sep, Optional) else sep
