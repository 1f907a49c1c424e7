#!/usr/bin/env python3
"""Basic usage example"""

import logged
from logged.handlers import ConsoleHandler

def main():
    # Attach a console handler to one branch of the tree
    db = logged.get_logger("svc.db")
    db.add_handler(ConsoleHandler(logged.DEBUG, fmt="{createdAt} {name} {level:5} {message}",
                                  date_format="%H:%M:%S"))
    db.propagate = False

    db.debug("connecting", {"host": "localhost"})
    db.info({"message": "query done", "elapsed": 0.25})

    # Records from loggers without handlers reach the root,
    # which falls back to the default console handler
    logged.get_logger("svc.api").warn("slow request")

    # Custom levels are callable right after registration
    logged.add_level("notice", 25)
    logged.get_logger("svc.api").notice("deploy finished")
    logged.notice("also on the root")

    logged.flush()

if __name__ == "__main__":
    main()
