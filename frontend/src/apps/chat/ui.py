"""Main UI for GroqMate"""

import streamlit as st
from chat_component import render_chat_component
from audio_component import render_audio_component
from vision_component import render_vision_component

LANGUAGES = ["English", "Ukrainian", "Spanish", "German", "French", "Polish"]

st.set_page_config(page_title="GroqMate", page_icon="🤖", layout="wide")

if "messages" not in st.session_state:
    st.session_state.messages = []
if "processing_audio" not in st.session_state:
    st.session_state.processing_audio = False

with st.sidebar:
    st.session_state.language = st.selectbox("Reply language", LANGUAGES)

st.title("🤖 GroqMate")
st.markdown("Chat by text or voice, or ask about an image")

col1, col2 = st.columns([2, 1])

with col1:
    render_chat_component()

with col2:
    render_audio_component()
    render_vision_component()

if st.sidebar.button("🗑️ Clear History"):
    st.session_state.messages = []
    st.rerun()

with st.sidebar:
    st.markdown("---")
    st.markdown("### 📊 Statistics")
    st.metric("Messages in history", len(st.session_state.messages))

    st.markdown("---")
    st.markdown("### ⚙️ Settings")
    st.markdown("""
    **Backend:** FastAPI
    **Chat:** Llama 4 Scout / Qwen 2.5 Coder (Groq)
    **Vision:** Gemini 1.5 Flash
    **STT:** Whisper Large v3 (Groq)
    """)
