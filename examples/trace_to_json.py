"""
Build a small request trace, end it, and print the finished spans as JSON lines.
"""

import argparse
import logging
import time

from census_span import MessageEventType, Span, SpanKind
from census_span.utils import generate_trace_id

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def build_trace(queries: int) -> Span:
    """Record a server span with one client child per query."""
    root = Span(trace_id=generate_trace_id(), name="GET /report", kind=SpanKind.SERVER)
    root.start()

    for i in range(queries):
        child = root.start_child_span({"name": f"db.query.{i}", "kind": SpanKind.CLIENT})
        child.start()
        child.add_attribute("db.statement", {"table": "orders", "page": i})
        child.add_message_event(MessageEventType.SENT, i)
        time.sleep(0.002)
        child.add_message_event(MessageEventType.RECEIVED, i)
        child.end()

    root.add_attribute("http.status_code", 200)
    root.end()
    return root


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--queries", type=int, default=3, help="Number of child spans to record")
    parser.add_argument("--debug", action="store_true", help="Show span model debug logging")
    args = parser.parse_args()

    if args.debug:
        logging.getLogger("census_span").setLevel(logging.DEBUG)

    root = build_trace(args.queries)
    spans = [root, *root.all_descendants()]
    logger.info(f"Exporting {len(spans)} spans for trace {root.trace_id}")

    for span in spans:
        print(span.to_finished().model_dump_json())


if __name__ == "__main__":
    main()
