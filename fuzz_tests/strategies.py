import hypothesis.strategies as st

from mixedset import Set

# The element domain that str(Set) can be parsed back from
elements = (
    st.text(max_size=8)
    | st.integers(min_value=-(2**64), max_value=2**64)
    | st.floats(allow_nan=False)
)


@st.composite
def sets(draw, items=elements, max_size: int = 12) -> Set:
    return Set(*draw(st.lists(items, max_size=max_size)))


# A small domain makes overlapping sets likely
small_sets = sets(st.integers(min_value=0, max_value=9) | st.sampled_from(["a", "b", "c"]))
