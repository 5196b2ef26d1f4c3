# app/ui/stats.py

import altair as alt
import streamlit as st
from services.api import get_task_stats
from ui.forms import completion_rate, status_rows
from ui.login import show_error


def stats_page():
    st.title("📊 작업 통계")

    stats = get_task_stats(st.session_state["access_token"])
    if show_error(stats):
        return

    if not stats.get("total"):
        st.info("아직 작업이 없습니다.")
        return

    rows = status_rows(stats)

    cols = st.columns(len(rows) + 1)
    for col, row in zip(cols, rows):
        col.metric(row["상태"], row["개수"])
    cols[-1].metric("전체", stats["total"])

    st.progress(int(completion_rate(stats)), text=f"완료율 {completion_rate(stats):.0f}%")

    data = alt.Data(values=rows)
    pie_col, bar_col = st.columns(2)
    with pie_col:
        st.subheader("상태별 비율")
        pie = alt.Chart(data).mark_arc().encode(
            theta="개수:Q",
            color=alt.Color("상태:N", legend=alt.Legend(orient="bottom")),
            tooltip=["상태:N", "개수:Q", "비율:Q"],
        )
        st.altair_chart(pie, use_container_width=True)
    with bar_col:
        st.subheader("상태별 개수")
        bar = alt.Chart(data).mark_bar().encode(
            x=alt.X("상태:N", sort=None),
            y="개수:Q",
            color="상태:N",
        )
        st.altair_chart(bar, use_container_width=True)
