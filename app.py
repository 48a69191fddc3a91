import logging
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from propdash.config.settings import get_settings
from propdash.services.error_handler import ErrorHandler
from propdash.services.list_views import LIST_VIEWS
from propdash.services.logging_service import configure_logging
from propdash.services.record_loader import load_records
from propdash.ui.components.tables import ListViewTable

load_dotenv()

settings = get_settings()
configure_logging(settings.app.log_level, settings.app.log_file)
logger = logging.getLogger("propdash.app")

# Configure page
st.set_page_config(
    page_title=settings.app.page_title,
    page_icon=settings.app.page_icon,
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_data
def load_view_records(view_name: str):
    """Load a view's record set from the data directory (JSON preferred over CSV).

    Returns the records and the number of rows skipped as invalid.
    """
    view = LIST_VIEWS[view_name]
    data_dir = Path(settings.app.data_dir)
    for suffix in (".json", ".csv"):
        path = data_dir / f"{view_name}{suffix}"
        if path.exists():
            error_handler = ErrorHandler()
            records = load_records(path, view.record_type, error_handler)
            return records, len(error_handler.handled)
    logger.warning(f"No record file for {view_name} in {data_dir}")
    return [], 0


def main():
    with st.sidebar:
        st.title("Navigation")
        view_name = st.radio(
            "View",
            list(LIST_VIEWS),
            format_func=lambda name: LIST_VIEWS[name].title,
        )

    st.title(f"{settings.app.page_icon} {settings.app.page_title}")

    records, skipped_rows = load_view_records(view_name)
    if skipped_rows:
        st.warning(f"{skipped_rows} invalid {LIST_VIEWS[view_name].title.lower()} row(s) were skipped")
    ListViewTable.render(LIST_VIEWS[view_name], records)


if __name__ == "__main__":
    main()
