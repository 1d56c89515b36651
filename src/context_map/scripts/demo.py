"""Walkthrough of records, object-to-map conversion and the context map.

Usage:
  context-map-demo
  python -m context_map.scripts.demo

Env:
  CONTEXT_MAP_LOG_LEVEL (optional)
  CONTEXT_MAP_LOG_FORMAT (optional, console|json)
  CONTEXT_MAP_APP_NAME / CONTEXT_MAP_APP_VERSION (optional)
"""

from __future__ import annotations

from pydantic import ValidationError

from ..config import APP_NAME, APP_VERSION, LOG_FORMAT, LOG_LEVEL
from ..context import ContextMap
from ..converters import to_map
from ..log import get_logger, setup_logging
from ..models import Person


def main() -> None:
    setup_logging(LOG_LEVEL, LOG_FORMAT, service_name=APP_NAME)
    log = get_logger(__name__)

    person1 = Person(name="Hong Gildong", age=30)
    person2 = Person(name="Kim Cheolsu", age=25)
    person3 = Person(name="Hong Gildong", age=30)

    print("person1 name:", person1.name)
    print("person1 age:", person1.age)
    print("person1:", person1)
    print("person1 == person3:", person1 == person3)
    print("person1 == person2:", person1 == person2)
    print(person2.describe())
    print(Person.record_info())

    ctx = ContextMap.of(to_map(person1) or {})
    (
        ctx.put("applicationName", APP_NAME)
        .put("version", APP_VERSION)
        .put("currentUser", person1.name)
        .put("transactionId", "TXN12345")
        .put("timeoutSeconds", 30)
        .put("flags", ["A", "B", "C"])
        .put("user", {"id": 1001, "name": person1.name})
    )
    log.info("context_map.built", entries=len(ctx))

    print("\nContext map lookups:")
    print("  applicationName:", ctx.get_string("applicationName"))
    print("  version:", ctx.get_string("version"))
    print("  currentUser:", ctx.get_string("currentUser"))
    print("  transactionId:", ctx.get_string("transactionId"))
    # Missing key degrades to the neutral default
    print("  sessionId:", repr(ctx.get_string("sessionId")))
    print("  sessionId present:", ctx.get_optional("sessionId", str).is_present())
    print("  timeoutSeconds (int):", ctx.get_int("timeoutSeconds"))
    print("  timeoutSeconds (long):", ctx.get_long("timeoutSeconds"))
    print("  timeoutSeconds (boolean):", ctx.get_boolean("timeoutSeconds"))
    print("  flags:", ctx.get_list("flags", str))
    user = ctx.get_map("user") or {}
    print("  user id:", user.get("id"))

    print("\nAll context entries:")
    for key, value in ctx.as_read_only_map().items():
        print(f"  {key}: {value}")

    try:
        Person(name="Invalid", age=-5)
    except ValidationError as e:
        log.warning("person.rejected", errors=e.error_count())
        print("\nValidation error:", e.errors()[0]["msg"])


if __name__ == "__main__":
    main()
