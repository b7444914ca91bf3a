import time

import streamlit as st

from config import get_settings
from feedback import SAFETY_TIPS, TIER_COLORS, headline_for
from logger_config import setup_logger
from samples import SAMPLE_MESSAGES, preview
from scorer import EmptyMessageError, analyze

# Parent of the scorer logger, so scoring debug output shares these handlers
logger = setup_logger("scam_shield")

PROGRESS_STEPS = 20

# ----------------------- Config & State -----------------------
st.set_page_config(
    page_title="Scam Shield",
    page_icon="🛡️",
    layout="centered",
)

if "message" not in st.session_state:
    st.session_state["message"] = ""
if "result" not in st.session_state:
    st.session_state["result"] = None


def _discard_result():
    st.session_state["result"] = None


def _load_sample(text: str):
    st.session_state["message"] = text
    st.session_state["result"] = None


def _clear():
    st.session_state["message"] = ""
    st.session_state["result"] = None


def _simulate_work(delay: float):
    """Cosmetic scan animation; scoring itself is instant."""
    if delay <= 0:
        return
    bar = st.progress(0, text="Analyzing...")
    for i in range(PROGRESS_STEPS):
        time.sleep(delay / PROGRESS_STEPS)
        bar.progress((i + 1) * 100 // PROGRESS_STEPS, text="Analyzing...")
    bar.empty()


def render_result(result):
    st.divider()
    st.subheader("Analysis Results")

    color = TIER_COLORS[result.risk_tier]
    c1, c2 = st.columns([3, 1])
    with c1:
        st.markdown(f"#### :{color}[{headline_for(result.risk_tier)}]")
    with c2:
        st.caption(f"Risk Score: {result.risk_score}/100")

    st.progress(result.display_score)
    st.markdown(f"**{result.recommendation}**")

    if result.flags:
        st.markdown("**Detected Issues:**")
        st.markdown("\n".join(f"- ⚠️ {flag}" for flag in result.flags))


# ----------------------- Header -----------------------
st.title("🛡️ Scam Shield")
st.write("Message Safety Analyzer. Paste a message and get a scam risk report.")

# ----------------------- Input -----------------------
st.subheader("Analyze Your Message")
st.text_area(
    "Paste the message you want to analyze:",
    key="message",
    placeholder="Paste your message here...",
    height=160,
    on_change=_discard_result,
)

message = st.session_state["message"]

cols = st.columns([3, 1])
with cols[0]:
    analyze_btn = st.button(
        "Analyze Message",
        key="analyze",
        disabled=not message.strip(),
    )
with cols[1]:
    st.button("Clear", key="clear", on_click=_clear)

st.markdown("**Try these sample messages:**")
for i, sample in enumerate(SAMPLE_MESSAGES):
    st.button(preview(sample), key=f"sample_{i}", on_click=_load_sample, args=(sample,))

# ----------------------- Main Analyze -----------------------
if analyze_btn:
    settings = get_settings()
    _simulate_work(settings.analysis_delay)
    try:
        st.session_state["result"] = analyze(message)
    except EmptyMessageError as e:
        logger.warning(f"Analyze requested with blank input: {e}")
        st.error(str(e))
    else:
        result = st.session_state["result"]
        logger.info(f"Analysis complete: tier={result.risk_tier} score={result.risk_score}")

if st.session_state["result"] is not None:
    render_result(st.session_state["result"])

# ----------------------- Tips -----------------------
st.divider()
st.subheader("🔍 Scam Detection Tips")
tip_cols = st.columns(2)
for i, (icon, title, text) in enumerate(SAFETY_TIPS):
    with tip_cols[i % 2]:
        st.markdown(f"{icon} **{title}**")
        st.caption(text)

st.caption("Note: This is a simple keyword-based check. It can miss context; always apply your own judgment.")
