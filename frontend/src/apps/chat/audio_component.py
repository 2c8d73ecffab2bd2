"""Voice input component for GroqMate"""

import streamlit as st
import requests
from streamlit_mic_recorder import mic_recorder

from chat_component import API_URL, ask_assistant


def render_audio_component():
    """Render voice input interface"""
    st.subheader("🎤 Voice Input")

    audio_data = mic_recorder(
        start_prompt="Start Recording",
        stop_prompt="Stop Recording",
        key='my_recorder'
    )

    # audio_data is dict: {'bytes': ..., 'sample_rate': ..., 'sample_width': ...}
    if audio_data:
        last_audio_id = st.session_state.get('last_processed_audio')
        current_audio_id = id(audio_data['bytes'])

        if current_audio_id != last_audio_id and not st.session_state.processing_audio:
            st.session_state.processing_audio = True
            st.session_state.last_processed_audio = current_audio_id

            with st.spinner("Transcribing..."):
                try:
                    response = requests.post(
                        f"{API_URL}/api/stt",
                        files={"audio": ("recording.wav", audio_data['bytes'], "audio/wav")},
                        timeout=120
                    )

                    if response.status_code == 200:
                        transcription = response.json().get("text", "")

                        if transcription:
                            st.session_state.messages.append({
                                "role": "user",
                                "content": transcription,
                                "type": "audio"
                            })
                            ask_assistant(transcription)
                            st.rerun()
                    else:
                        st.error(response.json().get("error", f"Server error: {response.status_code}"))

                except Exception as e:
                    st.error(f"An error occurred: {e}")
                finally:
                    st.session_state.processing_audio = False

    with st.expander("ℹ️ How to use voice input"):
        st.markdown("""
        1. Click the microphone button 🎤
        2. Speak your message
        3. Click the stop button ⏹️
        4. The transcript is sent to the assistant
        """)
