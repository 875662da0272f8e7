"""Temporal worker serving LineWrapWorkflow and wrap_text.

Usage:
    python -m linewrap.temporal.worker
"""

import asyncio
import signal
import sys

from temporalio.client import Client
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.worker import Worker

from linewrap.core.configs import app_config
from linewrap.core.deps import logger
from linewrap.temporal.activities.wrap import wrap_text
from linewrap.temporal.workflows.line_wrap import LineWrapWorkflow

WORKFLOWS = [LineWrapWorkflow]
ACTIVITIES = [wrap_text]


async def run_worker(shutdown_event: asyncio.Event | None = None) -> None:
    """Serve the line wrap workflow until shutdown_event is set.

    Without an event, SIGINT/SIGTERM stop the worker.
    """
    if shutdown_event is None:
        shutdown_event = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, shutdown_event.set)

    logger.info('temporal_connecting', host=app_config.TEMPORAL_HOST, namespace=app_config.TEMPORAL_NAMESPACE)
    client = await Client.connect(
        app_config.TEMPORAL_HOST,
        namespace=app_config.TEMPORAL_NAMESPACE,
        data_converter=pydantic_data_converter,
    )

    worker = Worker(
        client,
        task_queue=app_config.TEMPORAL_TASK_QUEUE,
        workflows=WORKFLOWS,
        activities=ACTIVITIES,
    )

    async with worker:
        logger.info(
            'worker_started',
            task_queue=app_config.TEMPORAL_TASK_QUEUE,
            max_line_length=app_config.WRAP_MAX_LINE_LENGTH,
        )
        await shutdown_event.wait()

    logger.info('worker_stopped')


def main() -> None:
    try:
        asyncio.run(run_worker())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == '__main__':
    main()
