"""
Parsing Interface Definitions
"""
import logging

from ..support.failureprone import illustration

logger = logging.getLogger(__name__)

# Style tags the parser hands back to the editor. Punctuation is unstyled: None.
NUMBER = 'number'
STRING = 'string'
BUILTIN = 'builtin'
KEYWORD = 'keyword'
VARIABLE = 'variable'
ATTRIBUTE = 'attribute'
INVALID = 'invalid'

class ParseErrorListener:
	"""
	Implement this interface to report/respond to problems in the text being parsed.
	
	Nothing here can stop the parser: by the time a method is called, the offending
	text is already consumed and will come back to the editor styled `invalid`.
	The default behavior is a DEBUG-level log entry with a picture of the spot.
	"""
	
	def unrecognized_character(self, stream, state):
		"""
		No lexical rule matched at `stream.left`. The parser has consumed
		exactly one character to make progress.
		"""
		if logger.isEnabledFor(logging.DEBUG):
			logger.debug("Unrecognized character:\n%s", illustration(stream.line, stream.left, 1))
	
	def unexpected_token(self, stream, token, state):
		"""
		The grammar had no use for `token`. `state` is already as the parser
		will resume from it.
		"""
		if logger.isEnabledFor(logging.DEBUG):
			picture = illustration(stream.line, token.start, token.end - token.start)
			logger.debug("Unexpected %s %r:\n%s", token.kind, token.value, picture)
