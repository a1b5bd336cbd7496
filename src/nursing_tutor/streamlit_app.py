"""Streamlit chat console for the nursing tutor.

Streamlit re-runs this script on every interaction, so the conversation
lives in st.session_state. Chat messages go to the FastAPI backend's
/chat endpoint; the sidebar calls get_nursing_knowledge directly through
/tools/{name}, which works even without an Anthropic API key.

Run locally with:
    streamlit run src/nursing_tutor/streamlit_app.py

The FastAPI backend must be running at AGENT_BACKEND_URL.
"""

import requests
import streamlit as st

from nursing_tutor.config import AGENT_BACKEND_URL

BACKEND_URL = AGENT_BACKEND_URL


def _post(path: str, payload: dict) -> str:
    """POST to the backend and return the text payload or a readable error."""
    try:
        resp = requests.post(f"{BACKEND_URL}{path}", json=payload, timeout=120)
        resp.raise_for_status()
        data = resp.json()
        return data.get("response") or data.get("result", "")
    except requests.exceptions.ConnectionError:
        return f"백엔드에 연결할 수 없습니다. FastAPI 서버가 {BACKEND_URL}에서 실행 중인가요?"
    except requests.exceptions.Timeout:
        return "요청 시간이 초과되었습니다. 잠시 후 다시 시도하세요."
    except Exception as e:
        return f"오류: {e}"


# --- Page config ---
st.set_page_config(
    page_title="Nursing Tutor",
    page_icon="\U0001fa7a",
)

st.title("간호 교육 튜터")
st.caption("간호 개념, 약물, 검사 수치, 간호진단, 사례 분석과 간호계획을 물어보세요.")

# --- Sidebar: direct knowledge lookup ---
with st.sidebar:
    st.header("빠른 검색")
    topic = st.text_input("주제", placeholder="예: 종양간호, 모르핀 약물")
    level = st.selectbox("수준", ["basic", "intermediate", "advanced"])
    if st.button("검색") and topic:
        with st.spinner("검색 중..."):
            st.markdown(_post("/tools/get_nursing_knowledge", {"topic": topic, "level": level}))

# --- Session state initialization ---
if "messages" not in st.session_state:
    # Each entry: {"role": "user"|"assistant", "content": str}
    st.session_state.messages = []

for msg in st.session_state.messages:
    st.chat_message(msg["role"]).write(msg["content"])

# --- Handle new user input ---
user_input = st.chat_input("질문을 입력하세요...")

if user_input:
    st.chat_message("user").write(user_input)
    st.session_state.messages.append({"role": "user", "content": user_input})

    with st.chat_message("assistant"):
        with st.spinner("생각 중..."):
            answer = _post("/chat", {"message": user_input})
        st.write(answer)

    st.session_state.messages.append({"role": "assistant", "content": answer})
