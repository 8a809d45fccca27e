import logging

import hydra
from omegaconf import DictConfig, OmegaConf

from notifications.channels.console import ConsoleLoggerNotification
from notifications.channels.webhook import WebhookNotification
from notifications.core.sinks import LoggingSink, OutputSink, resolve_level
from notifications.factory import create_notification
from notifications.registry import create_default_registry, register_notification


def _get_logger(log_level):
    logger = logging.getLogger("NotificationDemo")
    logger.setLevel(resolve_level(log_level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def _options(delivery):
    options = delivery.get("options", None)
    if options is None:
        return {}
    return OmegaConf.to_container(options, resolve=True)


def run_demo(cfg: DictConfig, sink: OutputSink):
    """
    Send every configured delivery, first through the closed factory and
    then through a registry extended at runtime. Returns the created
    notifications in order.
    """
    logger = _get_logger(cfg.logging.level)
    created = []

    logger.info("=== Simple factory ===")
    for delivery in cfg.factory.deliveries:
        notification = create_notification(delivery.kind, _options(delivery), sink=sink)
        logger.info("Created: %s", notification.describe())
        notification.send(delivery.recipient, delivery.message)
        created.append(notification)

    logger.info("=== Extensible factory ===")
    registry = create_default_registry(sink=sink, seed_defaults=cfg.registry.seed_defaults)

    @register_notification("slack", registry=registry)
    def _slack(options):
        return WebhookNotification.from_config(
            options,
            sink=sink,
            label="Slack",
            default_webhook=cfg.runtime.slack_webhook,
        )

    @register_notification("console-logger", registry=registry)
    def _console_logger(options):
        return ConsoleLoggerNotification.from_config(options, sink=sink)

    logger.info("Registered kinds: %s", ", ".join(registry.keys()))
    for delivery in cfg.registry.deliveries:
        notification = registry.create(delivery.kind, _options(delivery))
        logger.info("Created (runtime): %s", notification.describe())
        notification.send(delivery.recipient, delivery.message)
        created.append(notification)

    logger.info("Demo complete.")
    return created


@hydra.main(version_base=None, config_path='config', config_name='config')
def main(cfg: DictConfig) -> None:
    run_demo(cfg, sink=LoggingSink(log_level=cfg.logging.level))


if __name__ == "__main__":
    main()
