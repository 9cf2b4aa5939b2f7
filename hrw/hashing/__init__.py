from .digest import (
    Key as Key,
    digest as digest,
    fnv1a_32 as fnv1a_32,
)
from .int32 import (
    to_int32 as to_int32,
    to_uint32 as to_uint32,
)
from .weight import weight as weight
