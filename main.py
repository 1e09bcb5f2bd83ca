"""主程序入口 - 单次计算、批量计算和交互模式"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, OUTPUT_CONFIG, REPL_CONFIG, validate_config
from calculator import CalculatorError, ExpressionEvaluator
from utils.output import print_error, print_prompt, print_result

logger = logging.getLogger(__name__)


def run_once(evaluator, expression):
    """计算单个表达式，返回进程退出码"""
    logger.debug(f"One-shot expression: {expression}")
    try:
        result = evaluator.evaluate(expression)
    except CalculatorError as e:
        print_error(str(e))
        return 1
    print_result(result)
    return 0


def run_batch(evaluator, input_path, output_path=None):
    """逐行计算文件中的表达式；有任意一行失败时返回1"""
    logger.info(f"Reading expressions from {input_path}")
    with open(input_path, 'r', encoding='utf-8') as f:
        frame = evaluator.evaluate_batch(f)

    if output_path:
        logger.info(f"Saving results to {output_path}")
        frame.to_csv(output_path, index=False)
    elif not frame.empty:
        print(frame.to_string(index=False))

    return 1 if frame['error_code'].notna().any() else 0


def run_interactive(evaluator, stdin=None):
    """交互模式：读一行、计算、输出，直到 exit 或输入结束"""
    stdin = stdin if stdin is not None else sys.stdin
    print_prompt(REPL_CONFIG['prompt'])

    for line in stdin:
        expression = line.strip()
        if expression == REPL_CONFIG['exit_command']:
            break
        try:
            print_result(evaluator.evaluate(expression))
        except CalculatorError as e:
            print_error(str(e))

    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Infix arithmetic calculator (+ - * / ^, unary minus, parentheses)",
        epilog="Put '--' before an expression that starts with '-(', e.g. calculator -- -(2+3)",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate; words are joined with spaces. Omit to start the interactive mode"
    )
    parser.add_argument(
        "--input_file",
        type=str,
        default=None,
        help="Evaluate every line of this file and print a result table"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save the batch result table as CSV instead of printing it"
    )
    parser.add_argument(
        "--no_color",
        action="store_true",
        help="Disable ANSI colors"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    use_color = OUTPUT_CONFIG['use_color']
    if args.no_color:
        OUTPUT_CONFIG['use_color'] = False

    evaluator = ExpressionEvaluator()

    try:
        if args.input_file:
            return run_batch(evaluator, args.input_file, args.output_path)
        if args.expression:
            return run_once(evaluator, ' '.join(args.expression))
        return run_interactive(evaluator)
    finally:
        OUTPUT_CONFIG['use_color'] = use_color


if __name__ == "__main__":
    sys.exit(main())
