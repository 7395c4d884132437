import sys
import os
import argparse
import logging
from calc.take_home import TakeHomeCalculator
from calc.job_comparison import compare_jobs, pay_breakdown
from model.SwingPattern import UnknownSwingError
from render.renderers import (
    JobDetailsRenderer,
    ComparisonRenderer,
    PayBreakdownRenderer,
    SwingOptionsRenderer,
    RENDERER_REGISTRY,
)
from job_spec import load_spec, spec_path_for, JobSpecError


logger = logging.getLogger(__name__)

BASE_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '..'))


def calculate_program(calculator: TakeHomeCalculator, jobs: list) -> list:
    """Project every job in a program.

    Args:
        calculator: TakeHomeCalculator built from the reference files
        jobs: Validated job inputs from the program's spec.json

    Returns:
        List of (job name, JobResults) tuples in spec order
    """
    return [(job.name, calculator.project(job)) for job in jobs]


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='FIFO swing take-home pay calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  JobDetails     Print the full pay breakdown for each job (default)
  Comparison     Print two jobs side by side with the differences
  PayBreakdown   Print net pay, tax and HECS as stacked bars per job
  Swings         Print the available swing rosters

Examples:
  python src/Program.py example
  python src/Program.py example --mode Comparison
  python src/Program.py example --mode PayBreakdown
  python src/Program.py --mode Swings
        """
    )
    parser.add_argument('program_name', nargs='?', help='Name of the program (folder in input-parameters)')
    parser.add_argument('--mode', '-m',
                        choices=list(RENDERER_REGISTRY.keys()),
                        default='JobDetails',
                        help='Output mode: JobDetails (default), Comparison, PayBreakdown or Swings')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Log calculation details to stderr')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(name)s: %(message)s',
    )

    calculator = TakeHomeCalculator.from_reference()

    if args.mode == 'Swings':
        SwingOptionsRenderer().render(calculator.swings)
        return 0

    # Require program_name for every other mode
    if not args.program_name:
        parser.error("program_name is required unless --mode Swings is used")

    spec_path = spec_path_for(args.program_name, BASE_PATH)
    try:
        jobs = load_spec(spec_path, calculator.superannuation)
        results = calculate_program(calculator, jobs)
        logger.debug("Projected %d job(s) for program %s", len(results), args.program_name)
    except FileNotFoundError as e:
        print(e)
        return 1
    except (JobSpecError, UnknownSwingError) as e:
        print(f"Invalid spec {spec_path}: {e}")
        return 1

    if args.mode == 'JobDetails':
        for name, job_results in results:
            JobDetailsRenderer(name).render(job_results)
    elif args.mode == 'Comparison':
        if len(results) != 2:
            print(f"Comparison needs exactly two jobs; {args.program_name} has {len(results)}")
            return 1
        (first_name, first), (second_name, second) = results
        ComparisonRenderer().render(compare_jobs(first, second, first_name, second_name))
    elif args.mode == 'PayBreakdown':
        rows = pay_breakdown([r for _, r in results], [name for name, _ in results])
        PayBreakdownRenderer().render(rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
