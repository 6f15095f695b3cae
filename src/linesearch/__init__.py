"""Line-oriented literal text search."""

from .config import SearchConfig as SearchConfig
from .matcher import find_match as find_match
from .matcher import is_word_char as is_word_char
from .matcher import iter_matches as iter_matches
from .options import SearchOptions as SearchOptions
from .ranges import LineRange as LineRange
from .ranges import parse_bound as parse_bound
from .ranges import parse_range as parse_range
from .report import MatchReport as MatchReport
from .search import LineTooLongError as LineTooLongError
from .search import Match as Match
from .search import search_file as search_file
from .search import search_lines as search_lines
from .search import validate_term as validate_term
