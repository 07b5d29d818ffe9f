"""
Scanning Interface Definitions.
"""
from typing import NamedTuple

PUNCTUATION = 'Punctuation'
NUMBER = 'Number'
STRING = 'String'
KEYWORD = 'Keyword'
END_OF_LINE = 'EOF' # The lexicon reports this when a line runs out. It is never consumed.

class Token(NamedTuple):
	"""
	One lexeme from the current line. `start` and `end` are column offsets,
	so `line[token.start:token.end] == token.value` always holds.
	"""
	kind: str
	value: str
	start: int
	end: int
	
	def is_punctuation(self, value:str) -> bool:
		return self.kind == PUNCTUATION and self.value == value
