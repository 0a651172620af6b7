from logging import getLogger

from cdktf import App

from cdktfapp.main_stack import MainStack
from cdktfapp.schema import CdktfAppConfig

logger = getLogger(__name__)


def synth(config: CdktfAppConfig | None = None) -> App:
    """Build the app with its stack and synthesize it once."""
    if config is None:
        config = CdktfAppConfig.from_settings()

    app = App(outdir=config.outdir)

    MainStack(app, config.stack_name, tags=config.tags)

    logger.debug(f"Synthesizing stack {config.stack_name} into {app.outdir}")
    app.synth()
    logger.info(f"Synthesized stack {config.stack_name} into {app.outdir}")

    return app
