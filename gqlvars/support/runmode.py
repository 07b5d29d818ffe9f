"""
Run a mode over a whole text the way an editor would: line by line,
threading one parser state through, one token per call.
"""

import re
from typing import NamedTuple, Iterator

from ..scanning.stream import StringStream

_LINE_BREAK = re.compile(r'\r\n?|\n')

class Span(NamedTuple):
	line_number: int # Counting from zero.
	start: int
	end: int
	text: str
	style: object

def run_mode(text:str, mode, state=None) -> Iterator[Span]:
	"""
	Yield a Span for each token. Runs of whitespace are left out.
	Pass `state` to resume where an earlier call left off; it is updated in place.
	"""
	if state is None: state = mode.start_state()
	for line_number, line in enumerate(_LINE_BREAK.split(text)):
		stream = StringStream(line, mode.config.tab_size)
		while not stream.eol():
			style = mode.token(stream, state)
			if stream.current().strip():
				yield Span(line_number, stream.left, stream.right, stream.current(), style)

def highlight(text:str, mode, state=None) -> list:
	""" Just the (text, style) pairs. """
	return [(span.text, span.style) for span in run_mode(text, mode, state)]
