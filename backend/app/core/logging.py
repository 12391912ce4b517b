import logging


def configure_logging(environment: str) -> None:
    logging.basicConfig(
        level=logging.INFO if environment == "production" else logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    for noisy_logger in ("uvicorn.access", "watchfiles.main"):
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)
