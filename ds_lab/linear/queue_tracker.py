import json
from pathlib import Path

from ds_lab.renderer import format_value, render_array, render_queue
from ds_lab.trace import add_step, assemble_trace

# The first initial value is the head. The queue is array-backed: dequeue
# shifts the survivors toward index 0, which is what makes it O(n).

TAKEAWAYS = {
    "enqueue": "Enqueue is O(1): the value joins at the tail and nothing else moves.",
    "dequeue": (
        "Dequeue on an array-backed queue is O(n) because every remaining element shifts forward; "
        "a ring buffer or linked list makes it O(1)."
    ),
    "peek": "Peek is O(1): the head always sits at index 0.",
}


def _head_phrase(queue):
    if not queue:
        return "The queue is now empty."
    return f"Head: {format_value(queue[0])}, tail: {format_value(queue[-1])}, size {len(queue)}."


def generate_queue_enqueue_trace(initial_values, value, styles=None):
    queue = list(initial_values)
    queue.append(value)
    steps = []
    add_step(
        steps, "enqueue", "Append at tail",
        f"Add {format_value(value)} at the tail of the queue. {_head_phrase(queue)}",
        render_queue(queue, styles=styles),
        {"values": list(queue), "head": queue[0], "tail": value, "size": len(queue)},
    )
    return assemble_trace("queue", "enqueue", TAKEAWAYS["enqueue"], steps)


def generate_queue_dequeue_trace(initial_values, styles=None):
    """
    Remove the head, then narrate the left shift of the remaining elements.
    An empty queue produces a single step describing the underflow.
    """
    queue = list(initial_values)
    steps = []

    if not queue:
        add_step(
            steps, "dequeue", "Empty queue",
            "The queue is empty, so there is nothing to dequeue. The queue is unchanged.",
            render_queue(queue, styles=styles),
            {"values": [], "dequeued": None, "head": None, "size": 0},
        )
        return assemble_trace("queue", "dequeue", TAKEAWAYS["dequeue"], steps)

    # =================================================================
    # 1. Take the head out of slot 0
    # =================================================================
    head = queue[0]
    rest = queue[1:]
    add_step(
        steps, "dequeue", "Remove head",
        f"Take {format_value(head)} out of index 0, the head of the queue.",
        render_array([None] + rest, pointer=0, styles=styles),
        {"values": [None] + rest, "dequeued": head},
    )

    # =================================================================
    # 2. Shift the survivors toward index 0
    # =================================================================
    if rest:
        add_step(
            steps, "dequeue", "Shift remaining elements",
            f"The backing array shifts {len(rest)} element(s) ({', '.join(format_value(v) for v in rest)}) "
            "one slot left so the new head sits at index 0.",
            render_array(rest, highlight=range(len(rest)), styles=styles),
            {"values": list(rest), "moved": list(rest)},
        )

    add_step(
        steps, "dequeue", "New head",
        f"Dequeued {format_value(head)}. {_head_phrase(rest)}",
        render_queue(rest, styles=styles),
        {
            "values": list(rest),
            "dequeued": head,
            "head": rest[0] if rest else None,
            "size": len(rest),
        },
    )
    return assemble_trace("queue", "dequeue", TAKEAWAYS["dequeue"], steps)


def generate_queue_peek_trace(initial_values, styles=None):
    queue = list(initial_values)
    steps = []

    if queue:
        title = "Read head value"
        description = f"The head of the queue is {format_value(queue[0])}; the queue still holds {len(queue)} value(s)."
    else:
        title = "Empty queue"
        description = "The queue is empty, so there is no head value to read."
    add_step(
        steps, "peek", title, description,
        render_queue(queue, styles=styles),
        {"values": list(queue), "head": queue[0] if queue else None, "size": len(queue)},
    )
    return assemble_trace("queue", "peek", TAKEAWAYS["peek"], steps)


if __name__ == '__main__':
    my_queue = [4, 11, 6]
    output_dir = Path("traces/queue")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "queue_dequeue_trace.json"

    print(f"Generating queue dequeue trace for {my_queue}...")
    trace = generate_queue_dequeue_trace(my_queue)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(trace, f, indent=2, ensure_ascii=False)

    print(f"Trace saved to: {output_path}")
