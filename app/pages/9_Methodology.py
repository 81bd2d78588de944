import streamlit as st

st.set_page_config(page_title="Methodology", layout="wide")
st.title("Methodology")

st.markdown(
    r"""
### Offered traffic

- From a user population (busy hour):
  \[
  a = \frac{\text{users} \cdot \text{calls\_per\_user} \cdot \text{duration\_min}}{60} \cdot \text{busy\_hour\_factor}
  \]

### Erlang B

- Blocking probability with \(N\) channels, via the recurrence:
  \[
  B(0) = 1, \qquad B(n) = \frac{a \, B(n-1)}{n + a \, B(n-1)}
  \]
- Zero channels block everything (\(B = 1\)) unless there is no traffic (\(B = 0\)).

### Channel search

- Scan \(n = 1, 2, \dots, N_{max}\) and return the first \(n\) with \(B(n) \le\) target.
- \(B(n)\) never increases with \(n\), so the first hit is the minimum.
- No hit up to \(N_{max}\) means no solution (raise the ceiling or relax the target).

### E1 sizing

- One E1 carries 30 voice channels:
  \[
  \text{E1 lines} = \left\lceil \frac{n}{30} \right\rceil
  \]
"""
)
