"""Image description component for GroqMate"""

import base64

import streamlit as st
import requests

from chat_component import API_URL


def render_vision_component():
    st.subheader("🖼️ Image")

    uploaded = st.file_uploader("Upload an image", type=["png", "jpg", "jpeg", "webp", "gif"])
    question = st.text_input("Question about the image", placeholder="Describe this image.")

    if uploaded and st.button("Ask about image"):
        mime_type = uploaded.type or "image/jpeg"
        encoded = base64.b64encode(uploaded.getvalue()).decode("utf-8")
        data_uri = f"data:{mime_type};base64,{encoded}"

        with st.spinner("Looking at the image..."):
            try:
                response = requests.post(
                    f"{API_URL}/api/vision",
                    json={"base64Image": data_uri, "message": question},
                    timeout=120
                )
                if response.status_code == 200:
                    st.session_state.messages.append({
                        "role": "user",
                        "content": question or "Describe this image.",
                        "type": "image",
                        "image": uploaded.getvalue()
                    })
                    st.session_state.messages.append({"role": "assistant", "content": response.json()["reply"]})
                    st.rerun()
                else:
                    st.error(response.json().get("error", f"Server error: {response.status_code}"))
            except Exception as e:
                st.error(f"An error occurred: {e}")
