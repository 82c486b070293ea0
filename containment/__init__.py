from importlib.metadata import PackageNotFoundError, version as _dist_version

from dunamai import Version

from .logger import logger  # noqa

# Silent inside host programs until they opt in
logger.disable(__name__)

from .errors import (  # noqa
    ContainmentError,
    ContainmentTypeError,
    UnsupportedContainerError,
)
from .container import (  # noqa
    Container,
    adapter_for,
    contains,
    register,
    supports,
)
from .inverse import In, Member, is_in  # noqa
from .optional import NOTHING, Err, Ok, Some, option  # noqa
from .queries import Subsequence  # noqa
from .ranges import Span  # noqa
from .scalar import Exactly  # noqa
from .sorted_view import SortedView  # noqa
from .element_types import TypedContainer, typed  # noqa
from . import adapters  # noqa

try:
    __version__ = _dist_version(__name__)
except PackageNotFoundError:
    # Uninstalled source checkout
    try:
        __version__ = Version.from_any_vcs().serialize()
    except RuntimeError:
        __version__ = "0.0.0"
