"""UI subpackage - Streamlit presentation form."""
