import json
from pathlib import Path

from ds_lab.renderer import format_value, render_stack
from ds_lab.trace import add_step, assemble_trace

# The last initial value is the top of the stack.

TAKEAWAYS = {
    "push": "Push is O(1): the new value lands on top without touching anything below it.",
    "pop": "Pop is O(1): only the top slot changes, so the last value in is the first out.",
    "peek": "Peek is O(1): the top is always at a known position, so reading it costs nothing extra.",
}


def _top_phrase(stack):
    if not stack:
        return "The stack is now empty."
    return f"New top: {format_value(stack[-1])}, size {len(stack)}."


def generate_stack_push_trace(initial_values, value, styles=None):
    stack = list(initial_values)
    stack.append(value)
    steps = []
    add_step(
        steps, "push", "Push onto top",
        f"Place {format_value(value)} on top of the stack. {_top_phrase(stack)}",
        render_stack(stack, styles=styles),
        {"values": list(stack), "top": value, "size": len(stack)},
    )
    return assemble_trace("stack", "push", TAKEAWAYS["push"], steps)


def generate_stack_pop_trace(initial_values, styles=None):
    """Remove the top value; popping an empty stack is narrated as an underflow."""
    stack = list(initial_values)
    steps = []

    if not stack:
        add_step(
            steps, "pop", "Empty stack",
            "The stack is empty, so there is nothing to pop (stack underflow). The stack is unchanged.",
            render_stack(stack, styles=styles),
            {"values": [], "popped": None, "top": None, "size": 0},
        )
        return assemble_trace("stack", "pop", TAKEAWAYS["pop"], steps)

    popped = stack.pop()
    add_step(
        steps, "pop", "Pop top value",
        f"Remove {format_value(popped)} from the top of the stack. {_top_phrase(stack)}",
        render_stack(stack, styles=styles),
        {
            "values": list(stack),
            "popped": popped,
            "top": stack[-1] if stack else None,
            "size": len(stack),
        },
    )
    return assemble_trace("stack", "pop", TAKEAWAYS["pop"], steps)


def generate_stack_peek_trace(initial_values, styles=None):
    stack = list(initial_values)
    steps = []

    if stack:
        description = f"The top of the stack is {format_value(stack[-1])}; the stack still holds {len(stack)} value(s)."
        title = "Read top value"
    else:
        description = "The stack is empty, so there is no top value to read."
        title = "Empty stack"
    add_step(
        steps, "peek", title, description,
        render_stack(stack, styles=styles),
        {"values": list(stack), "top": stack[-1] if stack else None, "size": len(stack)},
    )
    return assemble_trace("stack", "peek", TAKEAWAYS["peek"], steps)


if __name__ == '__main__':
    my_stack = [2, 5, 9]
    output_dir = Path("traces/stack")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "stack_pop_trace.json"

    print(f"Generating stack pop trace for {my_stack}...")
    trace = generate_stack_pop_trace(my_stack)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(trace, f, indent=2, ensure_ascii=False)

    print(f"Trace saved to: {output_path}")
