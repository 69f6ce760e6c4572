# topmark:header:start
#
#   project      : IndexEnc
#   file         : strategies_indexenc.py
#   file_relpath : tests/strategies_indexenc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies shared by the IndexEnc property tests."""

from __future__ import annotations

from hypothesis import strategies as st

from indexenc.encoder.values import Record

# Delimiters drawn from characters that never occur in generated leaves.
DELIMITERS: tuple[str, ...] = (",", ";", "|", "::", "\t")

# Text without any delimiter character and without surrogates.
s_plain_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(
        exclude_categories=("Cs",),
        exclude_characters=",;|:\t",
    ),
    max_size=12,
)

s_field_name: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9_]{0,7}", fullmatch=True)

s_delimiter: st.SearchStrategy[str] = st.sampled_from(DELIMITERS)

s_leaf: st.SearchStrategy[object] = st.one_of(
    st.integers(),
    st.booleans(),
    st.floats(allow_nan=False),
    s_plain_text,
    st.binary(max_size=24),
)


def s_flat_record(max_fields: int = 6) -> st.SearchStrategy[Record]:
    """Records whose fields are all present, non-record leaves."""
    return st.lists(
        st.tuples(s_field_name, s_leaf),
        min_size=1,
        max_size=max_fields,
    ).map(lambda pairs: Record("Generated", pairs))
