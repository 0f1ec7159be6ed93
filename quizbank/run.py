import logging
import sys
from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf

from quizbank.data_models import CorpusResult, ValidationConfig
from quizbank.load.corpus import load_corpus
from quizbank.report import log_report, save_report
from quizbank.utils import setup_logging
from quizbank.validate.corpus import validate_corpus

LOGGER = logging.getLogger(__name__)


def exit_code(result: CorpusResult, fail_on_warnings: bool = False) -> int:
    if not result.valid:
        return 1
    if fail_on_warnings and result.warnings():
        return 1
    return 0


def run(cfg: DictConfig) -> CorpusResult:
    setup_logging(cfg.logging)
    LOGGER.info(f"Using corpus {cfg.corpus_path}")

    validation_config = ValidationConfig(**OmegaConf.to_container(cfg.validation, resolve=True))
    LOGGER.info(f"Using validation config {validation_config.model_dump()}")

    records = load_corpus(Path(cfg.corpus_path))
    result = validate_corpus(records, validation_config)
    log_report(result, log_findings=cfg.log_findings)

    if cfg.output_path is not None:
        save_report(Path(cfg.output_path), result)
    return result


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    result = run(cfg)
    sys.exit(exit_code(result, fail_on_warnings=cfg.fail_on_warnings))


if __name__ == "__main__":
    main()
