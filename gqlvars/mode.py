"""
Editor integration, such as it is: a registry of named modes, and the
`graphql-variables` mode itself. A mode bundles a parser with the bits of
configuration an editor asks for (electric input, folding, bracket pairs)
and answers indentation queries from the parser state. It owns no logic of
its own beyond that.
"""

import re
from typing import NamedTuple, Callable

from .support.interfaces import EditorConfig, UnknownMode
from .parsing.online import OnlineParser, ParserState
from .scanning.stream import StringStream
from . import variables

_FACTORIES : dict[str, Callable] = {}

def define_mode(name:str):
	"""
	Decorates a factory, which takes an EditorConfig and returns a Mode.
		@define_mode('my-language')
		def my_language(config): return Mode(config, ...)
	"""
	def decorator(factory):
		_FACTORIES[name] = factory
		return factory
	return decorator

def get_mode(name:str, config:EditorConfig=None) -> "Mode":
	try: factory = _FACTORIES[name]
	except KeyError: raise UnknownMode(name) from None
	return factory(config or EditorConfig())

def mode_names() -> list: return sorted(_FACTORIES)

class CloseBrackets(NamedTuple):
	pairs: str # Typed opener gets its closer inserted.
	explode: str # Pairs that split onto separate lines when Enter is pressed between them.

class Mode:
	def __init__(self, config:EditorConfig, parser:OnlineParser, *, electric_input, fold:str, close_brackets:CloseBrackets):
		self.config = config
		self.parser = parser
		self.electric_input = electric_input
		self.fold = fold
		self.close_brackets = close_brackets
	
	def start_state(self) -> ParserState: return self.parser.start_state()
	def token(self, stream:StringStream, state:ParserState): return self.parser.token(stream, state)
	def copy_state(self, state:ParserState) -> ParserState: return state.copy()
	
	def indent(self, state:ParserState, text_after:str) -> int:
		"""
		Column at which to start the next line: one indent unit per open bracket.
		If that line starts by closing a bracket, it lines up with the opener instead.
		With no bracket open, the next line keeps the indentation of the last one.
		"""
		if not state.level: return state.indent_level * self.config.indent_unit
		level = state.level
		if self.electric_input.match(text_after): level -= 1
		return max(0, level) * self.config.indent_unit

ELECTRIC_INPUT = re.compile(r'^\s*[}\]]')

@define_mode('graphql-variables')
def graphql_variables(config:EditorConfig) -> Mode:
	""" This mode defines JSON, but provides a data-laden parser state to enable better code intelligence. """
	return Mode(
		config,
		OnlineParser(variables.GRAMMAR, variables.lexemes, editor_config=config),
		electric_input=ELECTRIC_INPUT,
		fold='brace',
		close_brackets=CloseBrackets(pairs='[]{}""', explode='[]{}'),
	)
