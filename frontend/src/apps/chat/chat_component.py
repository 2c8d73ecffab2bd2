"""Text chat component for GroqMate"""

import os

import streamlit as st
import requests

API_URL = os.getenv("GROQMATE_API_URL", "http://127.0.0.1:5000")


def ask_assistant(prompt: str):
    """Send a message to the relay and append the answer to the history"""
    response = requests.post(
        f"{API_URL}/api/chat",
        json={"message": prompt, "language": st.session_state.language},
        timeout=60
    )

    if response.status_code == 200:
        answer = response.json().get("reply", "No response from model")
        st.session_state.messages.append({"role": "assistant", "content": answer})
    else:
        st.error(response.json().get("error", f"Server error: {response.status_code}"))


def render_chat_component():
    """Render text chat interface"""
    st.subheader("💬 Text Chat")

    # Display chat history
    chat_container = st.container()
    with chat_container:
        for message in st.session_state.messages:
            with st.chat_message(message["role"]):
                if message.get("type") == "audio":
                    st.markdown("🎤 *[Voice message]*")
                elif message.get("type") == "image":
                    st.image(message["image"], width=240)
                st.markdown(message["content"])

    if prompt := st.chat_input("Write a message..."):
        st.session_state.messages.append({"role": "user", "content": prompt})

        try:
            ask_assistant(prompt)
            st.rerun()
        except requests.exceptions.ConnectionError:
            st.error(f"Failed to connect to GroqMate API at {API_URL}.")
        except Exception as e:
            st.error(f"An error occurred: {e}")
