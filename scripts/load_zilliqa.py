import argparse
import logging

from zil_sleuth import PipelineFactory, settings
from zil_sleuth.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--ssn-nodes",
        action="store_true",
        help="Load SSN validators and their node URLs",
    )
    parser.add_argument(
        "--balances",
        nargs="+",
        metavar="ADDRESS",
        help="Load balances for these addresses",
        default=None,
    )
    parser.add_argument(
        "--seed",
        help="Seed node used to read the SSN list",
        default=settings.rpc.main_url,
    )
    args = parser.parse_args()
    setup_logging()

    source = PipelineFactory.create_zilliqa_source(nodes=[args.seed])
    pipeline = PipelineFactory.create_dlt_pipeline(name="zilliqa", dataset_name="zilliqa_raw")

    if args.ssn_nodes:
        info = pipeline.run(source.ssn_nodes(args.seed))
        logger.info(info)
    if args.balances:
        info = pipeline.run(source.balances(args.balances))
        logger.info(info)


if __name__ == "__main__":
    main()
