#!/usr/bin/env python3
import argparse
import os
import sys
from dataclasses import replace

from elasticbackup.models import RunContext
from elasticbackup.models.errors import PreconditionError
from elasticbackup.repositories import ConfigRepository, DEFAULT_CONFIG_PATH
from elasticbackup.services.backup_service import BackupService
from elasticbackup.services.notifier import Notifier
from elasticbackup.utils.logging import configure_logging, setup_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Elasticsearch backup agent")
    parser.add_argument('-c', '--config', default=os.environ.get("ELASTICBACKUP_CONFIG", DEFAULT_CONFIG_PATH),
                        help='Path to the YAML configuration file')
    parser.add_argument('--cluster-url', help='Override the Elasticsearch cluster URL')
    parser.add_argument('--webhook-url', help='Override the notification webhook URL')
    parser.add_argument('--dry-run', action='store_true', help='Run in dry-run mode without making any changes')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    context = RunContext()
    logger = setup_logger("ElasticBackup")
    logger.info("Start elasticbackup (Elasticsearch backup agent)")

    repository = ConfigRepository(args.config)
    notifier = Notifier(args.webhook_url, context)
    try:
        config = repository.read()
        if args.cluster_url:
            config = replace(config, cluster_url=args.cluster_url)
        if args.webhook_url:
            config = replace(config, webhook_url=args.webhook_url)
        notifier = Notifier(config.webhook_url, context)
        configure_logging(config.log_level, config.syslog)
        repository.validate(config)

        outcome = BackupService(config, context, dry_run=args.dry_run).run()
        logger.info(f"Backup run finished: {outcome.value}")
        return 0
    except PreconditionError as e:
        logger.error(str(e))
        notifier.notify(str(e))
        return 1
    except Exception as e:
        logger.error(f"Backup run failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
