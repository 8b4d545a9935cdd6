from .astar_search import Exhausted, Found, SearchResult, solve
from .frontier import Frontier
from .multi_source import solve_from_any
from .scored_entry import ScoredEntry
