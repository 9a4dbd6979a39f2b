import logging
from typing import Optional

from sumire.config import RunConfig
from sumire.exceptions import ScanError
from sumire.helper import Reporter
from sumire.interpreter import evaluate
from sumire.parse import parse
from sumire.tokenize import tokenize
from sumire.value import Value

logger = logging.getLogger(__name__)


def run(
    source: str,
    config: Optional[RunConfig] = None,
    reporter: Optional[Reporter] = None,
) -> Value:
    config = config if config is not None else RunConfig()
    reporter = reporter if reporter is not None else Reporter()
    logger.debug("running %d characters", len(source))
    tokens = tokenize(source, reporter)
    if config.fail_fast and reporter.had_error:
        raise ScanError(reporter.diagnostics)
    return evaluate(parse(tokens, reporter))
