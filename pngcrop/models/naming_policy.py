from enum import Enum


class NamingPolicy(str, Enum):
    IDENTITY = "identity"   # overwrite the input in place
    EXPLICIT = "explicit"   # caller-supplied destination, single input only
    PREFIXED = "prefixed"   # prefix + input path
