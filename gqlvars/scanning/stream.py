"""
This module supplies the character stream a mode's `token` function works on.

An editor hands the tokenizer one line at a time, and expects each call to
consume at least one character until the line is used up. The stream keeps
two cursors: `left` marks where the current token began, and `right` is the
scan position. The host moves `left` up to `right` between calls.
"""
import re

_WHITESPACE = re.compile(r'\s+')

def count_column(text:str, end:int, tab_size:int) -> int:
	""" Visual column of offset `end`, expanding tabs to the next multiple of `tab_size`. """
	column = 0
	for c in text[:end]:
		if c == '\t': column += tab_size - column % tab_size
		else: column += 1
	return column

class StringStream:
	"""
	A cursor over a single line of text.
	
	Patterns passed to `match` are anchored at the scan position:
	a match that would begin further along the line does not count.
	"""
	
	left: int
	right: int
	
	def __init__(self, line:str, tab_size:int=2):
		self.line = line
		self.tab_size = tab_size
		self.left = self.right = 0
	
	def sol(self) -> bool: return self.right == 0
	def eol(self) -> bool: return self.right >= len(self.line)
	
	def next(self):
		""" Consume and return one character, or None at end of line. """
		if self.eol(): return None
		self.right += 1
		return self.line[self.right - 1]
	
	def eat_space(self) -> bool:
		""" Skip whitespace; answer whether any was skipped. """
		m = _WHITESPACE.match(self.line, self.right)
		if m is None: return False
		self.right = m.end()
		return True
	
	def match(self, pattern, consume=True):
		"""
		Try a compiled regular expression (or a plain string) at the scan position.
		Returns the match object (or True for strings) and advances past it if `consume`.
		"""
		if isinstance(pattern, str):
			found = self.line.startswith(pattern, self.right)
			if found and consume: self.right += len(pattern)
			return found
		m = pattern.match(self.line, self.right)
		if m is not None and consume: self.right = m.end()
		return m
	
	def current(self) -> str:
		""" Text consumed since `left`. """
		return self.line[self.left:self.right]
	
	def finish(self): self.left = self.right
	
	def indentation(self) -> int:
		""" Width in columns of the line's leading whitespace. """
		m = _WHITESPACE.match(self.line)
		return 0 if m is None else count_column(self.line, m.end(), self.tab_size)
