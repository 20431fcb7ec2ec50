import asyncio

from config import Config
from core.errors import ApiClientError
from models.gamma_filters import EventQuery
from services.data_client import DataClient
from services.gamma_client import GammaClient
from utils.logger import LoggerFactory


async def main():
    config = Config()
    logger_factory = LoggerFactory(config.log_level, config.log_json)
    logger = logger_factory.create("main")

    logger.info("smoke_run_starting", gamma=config.gamma_base_url, data=config.data_base_url)

    gamma = GammaClient(logger=logger_factory.create("gamma"), config=config)
    data = DataClient(logger=logger_factory.create("data"), config=config)
    try:
        health = await data.get_health()
        logger.info("data_api_health", status=health.data)

        events = await gamma.get_active_events(EventQuery(limit=5, order="volume24hr", ascending=False))
        for event in events:
            logger.info(
                "active_event",
                slug=event.slug,
                volume_24hr=event.volume_24hr,
                markets=len(event.markets),
            )
    except ApiClientError as e:
        logger.error("smoke_run_failed", error=str(e), operation=e.operation)
    finally:
        await gamma.close()
        await data.close()
        logger.info("smoke_run_finished")


if __name__ == "__main__":
    asyncio.run(main())
