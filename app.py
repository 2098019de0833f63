# app.py
import streamlit as st

from algorithms.brute_force import brute_force_find_all
from algorithms.errors import SequenceMatchError
from algorithms.lcs import distance_from_length, lcs_length
from algorithms.rabin_karp import rabin_karp_find_all
from utils import config
from utils.highlight import highlight_occurrences_html
from utils.text_io import parse_sequence, read_uploaded_sequences

MODES = {
    "Brute force": brute_force_find_all,
    "Karp-Rabin": rabin_karp_find_all,
    "Longest common subsequence": None,
}

st.set_page_config(page_title="DNA Pattern Matching", layout="wide")
st.title("DNA Pattern Matching")

mode = st.radio("Algorithm", list(MODES), horizontal=True)

uploads = st.file_uploader("Upload the two sequence files (optional)", accept_multiple_files=True)
col_a, col_b = st.columns(2)
with col_a:
    raw_seq = st.text_area("DNA sequence", height=200)
with col_b:
    raw_pat = st.text_area("Pattern" if MODES[mode] else "Second DNA sequence", height=200)

if st.button("Run", type="primary"):
    try:
        if uploads:
            seqs, names = read_uploaded_sequences(uploads)
            if len(seqs) != 2:
                st.error("Upload exactly two files: the sequence and the pattern.")
                st.stop()
            sequence, pattern = seqs
            st.caption(f"{names[0]} vs {names[1]}")
        else:
            sequence = parse_sequence(raw_seq.strip().lower(), "sequence")
            pattern = parse_sequence(raw_pat.strip().lower(), "pattern")

        finder = MODES[mode]
        if finder is not None:
            offsets = finder(sequence, pattern)
            st.metric("Occurrences", len(offsets))
            st.markdown(highlight_occurrences_html(sequence, offsets, len(pattern)),
                        unsafe_allow_html=True)
        else:
            length = lcs_length(sequence, pattern, config.max_lcs_cells())
            st.metric("LCS length", length)
            st.metric("Distance", f"{distance_from_length(length, len(sequence), len(pattern)):.2f}")
    except SequenceMatchError as e:
        st.error(str(e))

# Run with: streamlit run app.py
