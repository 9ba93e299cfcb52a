import streamlit as st

from ds_lab.dispatcher import simulate
from ds_lab.registry import CHEAT_SHEET, PRESETS, get_structure, list_structures, preset_values
from ds_lab.web.inputs import (
    build_field_defaults,
    error_for_operation,
    field_default,
    format_initial_values,
    numeric_inputs,
    parse_initial_values,
)

# Run with: streamlit run ds_lab/web/app.py


def reset_for_structure(structure):
    """Reset the form when a different structure is picked."""
    operation = structure.operations[0]
    st.session_state.structure_id = structure.id
    st.session_state.operation_id = operation.id
    st.session_state.initial_raw = format_initial_values(structure.default_initial_values)
    st.session_state.field_values = build_field_defaults(operation)
    st.session_state.result = None
    st.session_state.error = None


def display_timeline(result):
    """Complexity, takeaway and the numbered steps of one simulation."""
    st.subheader("Timeline")
    st.caption("Inspect each transition to understand the mechanics behind the algorithm.")

    col1, col2 = st.columns([1, 2])
    with col1:
        st.markdown("**Complexity**")
        st.markdown(f"Time `{result['complexity']}` · Space `{result['space']}`")
    with col2:
        st.markdown("**Takeaway**")
        st.write(result["takeaway"])

    for number, step in enumerate(result["steps"], start=1):
        with st.container(border=True):
            st.markdown(f"**{number}. {step['title']}**")
            st.write(step["description"])
            st.code(step["visual"], language=None)


st.set_page_config(page_title="DS Lab", page_icon="🧮", layout="wide")
st.title("Interactive data structures")
st.caption("Run hands-on simulations for arrays, stacks, queues, and binary search trees.")

if "structure_id" not in st.session_state:
    reset_for_structure(list_structures()[0])

structure = get_structure(st.session_state.structure_id)

# --- Sidebar: structure picker, presets, cheat sheet ---
with st.sidebar:
    st.header("Structure")
    names = [s.name for s in list_structures()]
    picked = st.radio("Structure", names, index=names.index(structure.name), label_visibility="collapsed")
    if picked != structure.name:
        reset_for_structure(next(s for s in list_structures() if s.name == picked))
        st.rerun()
    st.caption(structure.description)

    st.header("Scenarios")
    for preset in PRESETS:
        if st.button(preset["label"], key=f"preset_{preset['id']}"):
            st.session_state.initial_raw = format_initial_values(preset_values(preset, structure))
            st.session_state.result = None
            st.rerun()

    st.header("Cheat sheet")
    for row in CHEAT_SHEET:
        st.markdown(f"- {row['label']}: time `{row['time']}`, space `{row['space']}`")

# --- Main area: configure and run ---
st.subheader("Configure operation")
st.caption("Tune inputs and run the simulator to see each phase of the algorithm.")

col1, col2 = st.columns(2)
with col1:
    st.session_state.initial_raw = st.text_input(
        "Initial values", value=st.session_state.initial_raw, placeholder="e.g. 1, 4, 9",
        help="Comma-separated numbers, up to 24 values.",
    )
with col2:
    operation_ids = [op.id for op in structure.operations]
    operation_id = st.selectbox(
        "Operation", operation_ids,
        index=operation_ids.index(st.session_state.operation_id),
        format_func=lambda op_id: f"{structure.operation(op_id).label} ({structure.operation(op_id).complexity})",
    )
    if operation_id != st.session_state.operation_id:
        st.session_state.operation_id = operation_id
        st.session_state.field_values = build_field_defaults(structure.operation(operation_id))
        st.session_state.result = None
        st.session_state.error = None
    operation = structure.operation(st.session_state.operation_id)
    st.caption(operation.summary)

if operation.fields:
    field_cols = st.columns(len(operation.fields))
    for field_col, field in zip(field_cols, operation.fields):
        with field_col:
            st.session_state.field_values[field.id] = st.text_input(
                field.label,
                value=st.session_state.field_values.get(field.id, ""),
                placeholder=field.placeholder or "",
                key=f"field_{structure.id}_{operation.id}_{field.id}",
            )

if st.button("Run simulation", type="primary"):
    values = parse_initial_values(st.session_state.initial_raw)
    error = error_for_operation(operation, values, st.session_state.field_values)
    if error:
        st.session_state.error = error
    else:
        st.session_state.error = None
        st.session_state.result = simulate(
            structure.id, operation.id, values, numeric_inputs(operation, st.session_state.field_values),
        )

if st.session_state.error:
    st.error(st.session_state.error)

if st.session_state.result is None:
    st.session_state.result = simulate(
        structure.id,
        operation.id,
        list(structure.default_initial_values),
        {f.id: field_default(f.id, operation) for f in operation.fields},
    )

st.markdown("---")
display_timeline(st.session_state.result)
