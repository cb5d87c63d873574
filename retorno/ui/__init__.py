"""Streamlit surfaces for the triage workflow."""
