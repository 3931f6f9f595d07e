from ._exceptions import EmptySetError, NotFoundError
from ._locked_set import LockedSet
from ._parser import parse_set
from ._render import quote, render
from ._set import Set
