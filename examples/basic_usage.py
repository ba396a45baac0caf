#!/usr/bin/env python3
"""Basic usage example"""

import logging
import sys

from formatter_module import (
    FormatterBuilder,
    FormatterConfig,
    LogEvent,
    LogLevel,
    SingleLineLoggingFormatter,
)

def main():
    # Create formatter with builder pattern
    formatter = (FormatterBuilder()
        .with_locale("de_DE")
        .with_pattern("HH:mm:ss")
        .build())

    # Format events directly
    sys.stdout.write(formatter.format(LogEvent(
        level=LogLevel.INFO,
        message="Loaded {0} records",
        parameters=(12500,),
        source_class_name="com.example.app.Importer",
        source_method_name="load",
    )))
    sys.stdout.write(formatter.format(LogEvent(
        level=LogLevel.SEVERE,
        source_class_name="com.example.app.Importer",
        source_method_name="close",
        thrown=ConnectionError("connection reset"),
    )))

    # Attach to the standard logging module
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(SingleLineLoggingFormatter(config=FormatterConfig.time_only()))
    logger = logging.getLogger("com.example.service.Worker")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    logger.debug("This is fine")
    logger.info("Application started")
    logger.warning("This is warning")
    logger.error("This is severe")

if __name__ == "__main__":
    main()
