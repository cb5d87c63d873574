"""Streamlit console to contact lapsed customers and record purchase outcomes."""
import webbrowser
from pathlib import Path
from typing import List

import streamlit as st

# Allow running via "streamlit run retorno/ui/dashboard.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from retorno.core import config
from retorno.core.logging import configure_logging
from retorno.core.models import CustomerRecord, Status
from retorno.review.cursor import JsonCursorStore
from retorno.review.session import Effect, TriageSession, run_effects
from retorno.review.workflow import OpenLink


def _cursor_store() -> JsonCursorStore:
    return JsonCursorStore(config.cursor_path())


def _load_session(source: Path | bytes) -> TriageSession:
    """Load the roster once per browser session to keep the app responsive."""

    if "triage" not in st.session_state:
        with st.spinner("⏳ Cargando datos..."):
            session = TriageSession(greeting=config.greeting_template(), sheet_name=config.sheet_name())
            session.load_workbook(source, cursor=_cursor_store().read())
        st.session_state.triage = session
    return st.session_state.triage


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def _dispatch(effects: List[Effect]) -> None:
    """Run side effects and remember the last WhatsApp link for the operator."""

    for effect in effects:
        if isinstance(effect, OpenLink):
            st.session_state["last_link"] = effect.url
    opener = webbrowser.open_new_tab if config.open_browser_enabled() else None
    run_effects(effects, open_link=opener, cursor_store=_cursor_store())


def _counters(session: TriageSession) -> None:
    counts = session.counts()
    columns = st.columns(4)
    columns[0].metric("Sin contactar", counts[Status.UNTOUCHED])
    columns[1].metric("Pendientes", counts[Status.PENDING])
    columns[2].metric("Compraron", counts[Status.PURCHASED])
    columns[3].metric("No compraron", counts[Status.NOT_PURCHASED])


def _customer_card(session: TriageSession) -> None:
    """Render the customer under the cursor with contact and navigation buttons."""

    queue = session.untouched_queue()
    record = session.current()
    if record is None:
        st.success("✅ Todos los clientes fueron contactados")
        return

    position = session.navigator.position
    with st.container(border=True):
        st.markdown(f"## {record.display_name}")
        st.caption(f"Código: {record.code or 'Sin código'}")
        if record.products:
            st.write(f"🛒 {record.products}")
        if record.ever_contacted:
            st.info("🔁 Este cliente ya había sido contactado antes")

        nav_cols = st.columns([1, 2, 1])
        with nav_cols[0]:
            if st.button("⬅️", disabled=position <= 0, help="Anterior"):
                _dispatch(session.prev())
                _rerun_app()
        with nav_cols[1]:
            st.markdown(
                f"<p style='text-align:center; font-weight:600;'>{position + 1} de {len(queue)}</p>",
                unsafe_allow_html=True,
            )
        with nav_cols[2]:
            if st.button("➡️", disabled=position >= len(queue) - 1, help="Siguiente"):
                _dispatch(session.next())
                _rerun_app()

        if st.button("📲 Enviar WhatsApp", type="primary"):
            _dispatch(session.contact(record.record_id))
            _rerun_app()
        if not record.phone:
            st.caption("Sin teléfono cargado")


def _pending_panel(session: TriageSession) -> None:
    """Pending customers with search, selection and outcome buttons."""

    st.markdown("### Pendientes de respuesta")
    search = st.text_input("Buscar por nombre o código", key="pending_search")
    pending: List[CustomerRecord] = session.pending_list(search)
    if not pending:
        st.info("No hay clientes pendientes para esta búsqueda.")
        return

    for record in pending:
        label = f"{record.display_name} · {record.code or 'Sin código'}"
        if st.button(label, key=f"select_{record.record_id}", use_container_width=True):
            session.select(record.record_id)
            _rerun_app()

    selected = session.selected
    if selected is None:
        st.caption("Elegí un cliente para registrar el resultado.")
        return

    st.markdown(f"#### Resultado para {selected.display_name}")
    reason = st.text_area("Motivo de no compra", key=f"reason_{selected.record_id}", placeholder="Escribí el motivo...")
    action_cols = st.columns(3)
    with action_cols[0]:
        if st.button("¡Compró!", type="primary"):
            session.record_outcome(purchased=True)
            _rerun_app()
    with action_cols[1]:
        if st.button("No compró"):
            session.record_outcome(purchased=False, reason=reason)
            _rerun_app()
    with action_cols[2]:
        if st.button("Cancelar"):
            session.clear_selection()
            _rerun_app()


def main() -> None:
    """Launch the single-operator triage console."""

    configure_logging()
    st.set_page_config(page_title="Clientes sin compra", layout="centered")
    st.title("Clientes sin compra reciente")

    with st.sidebar:
        st.subheader("Archivo")
        uploaded = st.file_uploader("Base de clientes (.xlsx)", type=["xlsx"])
        st.caption(f"Por defecto: `{config.input_path()}`")
        if st.button("Recargar datos", type="secondary"):
            st.session_state.pop("triage", None)
            st.session_state.pop("last_link", None)
            _rerun_app()

    source = uploaded.getvalue() if uploaded is not None else config.input_path()
    # file_id changes on every upload, even when the file name repeats
    source_key = uploaded.file_id if uploaded is not None else str(source)
    if st.session_state.get("source_key") != source_key:
        st.session_state.pop("triage", None)
        st.session_state["source_key"] = source_key
    session = _load_session(source)

    for alert in session.alerts:
        st.warning(f"⚠️ {alert}")
    if not len(session.store):
        return

    _counters(session)

    last_link = st.session_state.get("last_link")
    if last_link:
        st.link_button("Abrir WhatsApp del último contacto", last_link)

    _customer_card(session)
    st.divider()
    _pending_panel(session)

    with st.sidebar:
        st.subheader("Exportar")
        st.download_button(
            "Descargar Excel actualizado",
            data=session.export(),
            file_name=config.DEFAULT_EXPORT_FILENAME,
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )


if __name__ == "__main__":
    main()
