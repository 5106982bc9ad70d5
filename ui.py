import asyncio
import logging
from datetime import datetime
import pandas as pd
import streamlit as st
from config import ConfigError, load_config
from controller import ERROR
from locales import SUPPORTED_LOCALES
from main import build_controller
from utils import DATE_FORMAT

TIME_FORMAT = '%H:%M'
# topic, date, start, end, participants, edit, delete
TABLE_WIDTHS = [3, 2, 2, 2, 3, 1, 1]

def meetings_frame(meetings, messages):
    """Table rows for the meeting list, with localised column headers."""
    rows = [{
        messages['label_topic']: m.topic,
        messages['label_date']: m.date,
        messages['label_start_time']: m.start_time,
        messages['label_end_time']: m.end_time,
        messages['label_participants']: m.participants_text(),
    } for m in meetings]
    columns = [messages[k] for k in ('label_topic', 'label_date', 'label_start_time',
                                     'label_end_time', 'label_participants')]
    return pd.DataFrame(rows, columns=columns)

def _to_date(value):
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None

def _to_time(value):
    try:
        return datetime.strptime(value[:5], TIME_FORMAT).time()
    except ValueError:
        return None

def _reset_form():
    # New widget keys so the form picks up the (new) draft values
    st.session_state["form_version"] += 1

def show_notices(controller):
    for notice in controller.drain_notices():
        st.toast(notice.message, icon="❌" if notice.level == ERROR else "✅")

def render():
    try:
        config = load_config()
    except ConfigError as e:
        st.error(f"Configuration error: {e}")
        st.stop()

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Initialize session state
    if "controller" not in st.session_state:
        st.session_state["controller"] = build_controller(config)
        st.session_state["form_version"] = 0
        st.session_state["loaded"] = False
    controller = st.session_state["controller"]

    # Language
    current = config.locale if config.locale in SUPPORTED_LOCALES else SUPPORTED_LOCALES[0]
    locale = st.sidebar.selectbox(controller.messages['label_language'], SUPPORTED_LOCALES,
                                  index=SUPPORTED_LOCALES.index(current), key="locale")
    controller.set_locale(locale)
    messages = controller.messages

    # Load once, when the view is first shown
    if not st.session_state["loaded"]:
        asyncio.run(controller.load())
        st.session_state["loaded"] = True

    st.title(messages['page_title'])

    # Form
    st.header(controller.form_title)
    version = st.session_state["form_version"]
    draft = controller.draft
    with st.form(key=f"meeting_form_{version}"):
        topic = st.text_input(messages['label_topic'], draft.topic, key=f"topic_{version}")
        date_value = st.date_input(messages['label_date'], _to_date(draft.date), key=f"date_{version}")
        start_value = st.time_input(messages['label_start_time'], _to_time(draft.start_time),
                                    step=60, key=f"start_time_{version}")
        end_value = st.time_input(messages['label_end_time'], _to_time(draft.end_time),
                                  step=60, key=f"end_time_{version}")
        participants = st.text_input(messages['label_participants'], draft.participants_text(),
                                     key=f"participants_{version}")
        if controller.error:
            st.markdown(f"<p style='color:#ef4444'>{controller.error}</p>", unsafe_allow_html=True)
        submitted = st.form_submit_button(controller.submit_label, key=f"submit_{version}")

    if submitted:
        controller.update_field('topic', topic)
        controller.update_field('date', date_value.isoformat() if date_value else '')
        controller.update_field('start_time', start_value.strftime(TIME_FORMAT) if start_value else '')
        controller.update_field('end_time', end_value.strftime(TIME_FORMAT) if end_value else '')
        controller.update_field('participants', participants)
        if asyncio.run(controller.submit()):
            _reset_form()
        st.rerun()

    if controller.is_editing and st.button(messages['button_cancel'], key="cancel_edit"):
        controller.cancel_edit()
        _reset_form()
        st.rerun()

    # Meeting list
    st.header(messages['list_title'])
    if not controller.meetings:
        st.info(messages['no_meetings'])
    else:
        frame = meetings_frame(controller.meetings, messages)

        # Table header
        header_cols = st.columns(TABLE_WIDTHS)
        for col, label in zip(header_cols, list(frame.columns) + [messages['label_actions']]):
            col.markdown(f"**{label}**")

        # Buttons are keyed by meeting id so they stay bound to their row across reloads
        for meeting, row in zip(controller.meetings, frame.itertuples(index=False)):
            cols = st.columns(TABLE_WIDTHS)
            for col, value in zip(cols, row):
                col.text(value)
            if cols[5].button(messages['button_edit'], key=f"edit_{meeting.id}"):
                controller.begin_edit(meeting)
                _reset_form()
                st.rerun()
            if cols[6].button(messages['button_delete'], key=f"delete_{meeting.id}", type="primary"):
                if asyncio.run(controller.delete(meeting.id)) and controller.editing_id == meeting.id:
                    controller.cancel_edit()
                    _reset_form()
                st.rerun()

    show_notices(controller)

if __name__ == "__main__":
    render()
