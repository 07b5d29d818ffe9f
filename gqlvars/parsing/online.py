"""
This file gives the essential algorithm for online parsing with a table of grammar rules.

"Online" means the parser never sees the whole document. An editor hands it one
line at a time, and asks for one token's style per call. Between calls (and
between lines) everything the parser knows lives in a ParserState, which the
editor keeps for it. So there can be no recursion on the native call stack:
a recursive-descent parser's pending obligations are kept instead as an
explicit stack of Frames, each pointing at one step of one grammar rule.

The top of the stack is the next thing expected. Each incoming token is
resolved against it:
	* A terminal either matches (and is styled) or does not (and is `invalid`).
	  Either way the frame is done.
	* A rule name is replaced by the steps of that rule, first step on top.
	* A dispatch rule is replaced by whichever rule it picks for this token.
	* A repetition stays put while the token can start another item or is
	  the separator after one. It goes away when the frames below it want
	  the token, or when the token is a closing bracket. Any other token is
	  `invalid`, and the repetition stays put for the next one.
	* An optional step goes away, leaving its content behind if the token fits.
Anything but a terminal is resolved again without consuming the token.

When a token does not fit, only the one frame that could not use it is
dropped, and parsing continues with the frame below. A dropped closing
bracket counts as closed, so `level` keeps matching the stack.
Nothing ever raises on account of the input text.
"""

from typing import NamedTuple, Optional as Maybe

from ..scanning.interface import PUNCTUATION, END_OF_LINE, Token
from ..scanning.lexicon import Lexicon
from ..scanning.stream import StringStream
from ..support.interfaces import UnknownRule, EditorConfig
from .interface import INVALID, ParseErrorListener
from .rules import Terminal, Repetition, Optional, separator_terminal

OPENERS = '{['
CLOSERS = '}]'

class Frame(NamedTuple):
	"""
	Step number `step` of grammar rule `rule`. (For a dispatch rule, `step` is zero.)
	`items` and `separated` only mean something when that step is a Repetition:
	how many items it has seen, and whether a separator came since the last one.
	"""
	rule: str
	step: int = 0
	items: int = 0
	separated: bool = False

class ParserState:
	"""
	Everything the parser remembers between calls. The editor stores it opaquely
	and hands it back for the next token or line. It is plain data: frames refer
	to grammar steps by rule name and index, so a state can be copied or pickled.

	rule_stack: pending Frames, top of stack last.
	level: how many brackets are open.
	name: the most recently matched key, without quotes. Not a path.
	indent_level: the current line's indentation, in tab stops.
	"""
	def __init__(self, rule_stack=(), level=0, name=None, indent_level=0):
		self.rule_stack = list(rule_stack)
		self.level = level
		self.name = name
		self.indent_level = indent_level

	@property
	def kind(self) -> Maybe[str]:
		""" The name of the rule the next token will be held against. """
		return self.rule_stack[-1].rule if self.rule_stack else None

	def copy(self) -> "ParserState":
		""" The parser never does this. Callers who want a snapshot must. """
		return ParserState(self.rule_stack, self.level, self.name, self.indent_level)

	def __eq__(self, other):
		if not isinstance(other, ParserState): return NotImplemented
		return (self.rule_stack, self.level, self.name, self.indent_level) == (other.rule_stack, other.level, other.name, other.indent_level)

	def __repr__(self):
		return "ParserState(%r, level=%d, name=%r, indent_level=%d)"%(self.rule_stack, self.level, self.name, self.indent_level)

class OnlineParser:
	"""
	Connects a Lexicon and a grammar table to the editor's tokenizer contract.
	The parser itself holds no per-document data, so one instance may serve
	any number of documents, each with its own ParserState.
	"""
	def __init__(self, grammar:dict, lexicon:Lexicon, *, start='Document', editor_config:EditorConfig=None, on_error:ParseErrorListener=None):
		self.__grammar = grammar
		self.__lexicon = lexicon
		self.__start = start
		self.__config = editor_config or EditorConfig()
		self.__on_error = on_error or ParseErrorListener()
		self.__rule(start)

	def __rule(self, name):
		try: return self.__grammar[name]
		except KeyError: raise UnknownRule(name) from None

	def __step(self, frame:Frame):
		rule = self.__rule(frame.rule)
		return rule if callable(rule) else rule[frame.step]

	def __push(self, state:ParserState, name:str):
		""" Expand the named rule onto the stack, first step on top. """
		rule = self.__rule(name)
		if callable(rule): state.rule_stack.append(Frame(name))
		else: state.rule_stack.extend(Frame(name, i) for i in reversed(range(len(rule))))

	def start_state(self) -> ParserState:
		state = ParserState()
		self.__push(state, self.__start)
		return state

	def can_begin(self, step, token:Token) -> bool:
		""" Could `token` be the first one matched by `step`? """
		if isinstance(step, Terminal): return step.match(token)
		if isinstance(step, (Repetition, Optional)): return self.can_begin(step.of_rule, token)
		rule = self.__rule(step)
		if callable(rule): return rule(token) is not None
		for item in rule:
			if self.can_begin(item, token): return True
			if not isinstance(item, (Repetition, Optional)): return False
		return False

	def token(self, stream:StringStream, state:ParserState) -> Maybe[str]:
		"""
		Consume one token (or one run of whitespace) from the stream and return its style.
		The styled text is `stream.current()` afterwards. At end of line, nothing is
		consumed, None is returned, and the state is ready for the next line.
		"""
		stream.finish()
		if stream.sol(): state.indent_level = stream.indentation() // self.__config.tab_size
		if stream.eat_space(): return None
		token = self.__lexicon.lex(stream)
		if token is None:
			stream.next()
			self.__on_error.unrecognized_character(stream, state)
			return INVALID
		if token.kind == END_OF_LINE: return None
		return self.__advance(stream, state, token)

	def __advance(self, stream:StringStream, state:ParserState, token:Token) -> Maybe[str]:
		stack = state.rule_stack
		while stack:
			frame = stack.pop()
			step = self.__step(frame)
			if callable(step):
				target = step(token)
				if target is None: break
				self.__push(state, target)
			elif isinstance(step, str):
				self.__push(state, step)
			elif isinstance(step, Repetition):
				sep = separator_terminal(step)
				if sep is not None and frame.items and not frame.separated and sep.match(token):
					stack.append(frame._replace(separated=True))
					return self.__accept(state, sep, token)
				if self.can_begin(step.of_rule, token):
					stack.append(frame._replace(items=frame.items+1, separated=False))
					if isinstance(step.of_rule, Terminal): return self.__accept(state, step.of_rule, token)
					self.__push(state, step.of_rule)
				elif not (self.__wanted_below(stack, token) or (token.kind == PUNCTUATION and token.value in CLOSERS)):
					# A stray token inside the list. The list carries on after it.
					stack.append(frame)
					break
			elif isinstance(step, Optional):
				if self.can_begin(step.of_rule, token):
					if isinstance(step.of_rule, Terminal): return self.__accept(state, step.of_rule, token)
					self.__push(state, step.of_rule)
			elif step.match(token):
				return self.__accept(state, step, token)
			else:
				# The bracket this frame was waiting to close is given up for closed.
				if step.text is not None and step.text in CLOSERS: state.level = max(0, state.level - 1)
				break
		self.__on_error.unexpected_token(stream, token, state)
		return INVALID

	def __wanted_below(self, stack, token:Token) -> bool:
		""" Would the frames under a finished repetition have a use for `token`? """
		for frame in reversed(stack):
			step = self.__step(frame)
			if callable(step): return step(token) is not None
			if self.can_begin(step, token): return True
			if not isinstance(step, (Repetition, Optional)): return False
		return False

	@staticmethod
	def __accept(state:ParserState, terminal:Terminal, token:Token) -> Maybe[str]:
		if terminal.update is not None: terminal.update(state, token)
		if token.kind == PUNCTUATION:
			if token.value in OPENERS: state.level += 1
			elif token.value in CLOSERS: state.level = max(0, state.level - 1)
		return terminal.style
