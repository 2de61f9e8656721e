import asyncio
from datetime import datetime


async def run_blocking(func, *args):
    """Run a blocking call in the default executor so the event loop stays free."""
    return await asyncio.get_running_loop().run_in_executor(None, func, *args)


def get_processing_time(start_time: datetime) -> str:
    return f"{(datetime.now() - start_time).total_seconds():.1f}s"
