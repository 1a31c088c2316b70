import pytest

from pngcrop.models.naming_policy import NamingPolicy
from pngcrop.services.path_resolver import PathResolver


def test_identity():
    resolver = PathResolver(NamingPolicy.IDENTITY)
    assert resolver.resolve("a/b.png") == "a/b.png"


def test_prefix_is_plain_concatenation():
    resolver = PathResolver(NamingPolicy.PREFIXED, prefix="cropped_")
    assert resolver.resolve("a/b.png") == "cropped_a/b.png"


def test_explicit_output_wins_when_given():
    resolver = PathResolver(NamingPolicy.PREFIXED, prefix="cropped_")
    assert resolver.resolve("a/b.png", "out.png") == "out.png"


def test_explicit_policy_needs_output():
    with pytest.raises(ValueError):
        PathResolver().resolve("a.png", policy=NamingPolicy.EXPLICIT)


def test_policy_can_be_given_by_name():
    resolver = PathResolver("prefixed", prefix="x_")
    assert resolver.resolve("b.png") == "x_b.png"
    assert resolver.resolve("b.png", policy="identity") == "b.png"
