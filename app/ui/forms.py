# app/ui/forms.py

# Input checks and data shaping shared by the pages. No Streamlit calls here.

STATUSES = ["TODO", "IN_PROGRESS", "COMPLETED"]
STATUS_LABELS = {
    "TODO": "📝 할 일",
    "IN_PROGRESS": "🚧 진행 중",
    "COMPLETED": "✅ 완료",
}

TITLE_MAX = 100
DESCRIPTION_MAX = 500


def validate_task_input(title, description):
    """
    Mirrors the server's limits so obvious mistakes are caught before a request.
    Returns a list of error messages.
    """
    errors = []
    if not title or not title.strip():
        errors.append("제목은 필수입니다.")
    elif len(title) > TITLE_MAX:
        errors.append(f"제목은 {TITLE_MAX}자 이하여야 합니다.")
    if description and len(description) > DESCRIPTION_MAX:
        errors.append(f"설명은 {DESCRIPTION_MAX}자 이하여야 합니다.")
    return errors


def validate_registration(username, password, confirm_password):
    errors = []
    if not username or not username.strip():
        errors.append("아이디를 입력해주세요.")
    if not password:
        errors.append("비밀번호를 입력해주세요.")
    elif password != confirm_password:
        errors.append("비밀번호가 일치하지 않습니다.")
    return errors


def group_by_status(tasks):
    columns = {s: [] for s in STATUSES}
    for task in tasks:
        columns.setdefault(task["status"], []).append(task)
    return columns


def completion_rate(stats):
    total = stats.get("total", 0)
    if not total:
        return 0.0
    return stats.get("completed", 0) / total * 100


def status_rows(stats):
    """
    One row per status for the charts: {"상태", "개수", "비율"}.
    """
    counts = [
        (STATUS_LABELS["TODO"], stats.get("todo", 0)),
        (STATUS_LABELS["IN_PROGRESS"], stats.get("inProgress", 0)),
        (STATUS_LABELS["COMPLETED"], stats.get("completed", 0)),
    ]
    total = stats.get("total", 0)
    return [
        {"상태": label, "개수": n, "비율": round(n / total * 100, 1) if total else 0.0}
        for label, n in counts
    ]
