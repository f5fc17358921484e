"""
cecbench Command-Line Interface

Evaluate CEC 2013 / CEC 2014 benchmark functions from the shell:
- eval:    evaluate one problem at a point (or at its optimum)
- check:   evaluate every problem of a suite at its optimum and compare
           against the problem bias
- version: print version information
"""

import sys
import argparse
import time
import numpy as np

from .canonical_json import canonical_dumps
from .problem import get_suite_problems, make_problem
from .resources import GeneratedResourceProvider, GeneratorConfig
from .suites import SUITES


def _provider(args) -> GeneratedResourceProvider:
    return GeneratedResourceProvider(GeneratorConfig(seed=args.seed))


def _preview(x: np.ndarray) -> str:
    return f"{x[:min(5, len(x))]}{'...' if len(x) > 5 else ''}"


def _write_output(path: str, data) -> None:
    with open(path, 'w') as f:
        f.write(canonical_dumps(data, indent=2))
    print(f"\nResults saved to: {path}")


def cmd_eval(args):
    """Evaluate one problem."""
    try:
        problem = make_problem(args.suite, args.problem, args.dim, _provider(args))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.x:
        x = np.array(args.x, dtype=np.float64)
        if len(x) != args.dim:
            print(f"Error: point length ({len(x)}) must match dimension ({args.dim})")
            return 1
    else:
        x, _ = problem.optimum

    value = problem.fitness(x)

    print(f"Suite: {args.suite}")
    print(f"Problem: {args.problem} ({problem.definition.strategy.value})")
    print(f"Dimension: {args.dim}")
    print(f"Point: {_preview(x)}")
    print(f"f(x) = {value:.10e}")
    print(f"Bias: {problem.bias:.1f}")

    if args.output:
        _write_output(args.output, {
            'suite': args.suite,
            'problem': args.problem,
            'dimension': args.dim,
            'seed': args.seed,
            'x': x,
            'f': value,
            'bias': problem.bias,
        })
    return 0


def cmd_check(args):
    """Evaluate every problem of a suite at its optimum."""
    print("=" * 60)
    print(f"Optimum check: {args.suite} {args.dim}D")
    print("=" * 60)

    try:
        problems = get_suite_problems(args.suite, args.dim, _provider(args))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    results = []
    for problem in problems:
        x_star, f_star = problem.optimum
        start = time.time()
        value = problem.fitness(x_star)
        elapsed = time.time() - start
        error = abs(value - f_star)
        ok = error <= args.tol
        status = "OK" if ok else "FAIL"
        print(f"F{problem.prob_id:<3} {problem.definition.strategy.value:12} "
              f"[{status}] f={value:.6f} bias={f_star:.1f} err={error:.2e} "
              f"({elapsed * 1e3:.2f}ms)")
        results.append({
            'problem': problem.prob_id,
            'f': value,
            'bias': f_star,
            'error': error,
            'ok': ok,
        })

    passed = sum(1 for r in results if r['ok'])
    print(f"\nTotal: {passed}/{len(results)} at optimum")

    if args.output:
        _write_output(args.output, {
            'suite': args.suite,
            'dimension': args.dim,
            'seed': args.seed,
            'tol': args.tol,
            'results': results,
        })
    return 0 if passed == len(results) else 1


def cmd_version(args):
    """Print version information."""
    from . import __version__
    print(f"cecbench {__version__}")
    print("CEC 2013 / CEC 2014 single-objective benchmark functions")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='cecbench',
        description='cecbench - CEC 2013 / CEC 2014 benchmark evaluation'
    )
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Eval command
    eval_parser = subparsers.add_parser('eval', help='Evaluate one problem')
    eval_parser.add_argument('--suite', '-s', choices=sorted(SUITES), default='cec2014',
                             help='Suite (default: cec2014)')
    eval_parser.add_argument('--problem', '-p', type=int, default=1,
                             help='Problem id (default: 1)')
    eval_parser.add_argument('--dim', '-d', type=int, default=10,
                             help='Dimension (default: 10)')
    eval_parser.add_argument('--x', type=float, nargs='+',
                             help='Point to evaluate (default: the optimum)')
    eval_parser.add_argument('--seed', type=int, default=0,
                             help='Resource generator seed (default: 0)')
    eval_parser.add_argument('--output', '-o', type=str,
                             help='Output JSON file')
    eval_parser.set_defaults(func=cmd_eval)

    # Check command
    check_parser = subparsers.add_parser('check', help='Check every problem at its optimum')
    check_parser.add_argument('--suite', '-s', choices=sorted(SUITES), default='cec2014',
                              help='Suite (default: cec2014)')
    check_parser.add_argument('--dim', '-d', type=int, default=10,
                              help='Dimension (default: 10)')
    check_parser.add_argument('--seed', type=int, default=0,
                              help='Resource generator seed (default: 0)')
    check_parser.add_argument('--tol', type=float, default=1e-6,
                              help='Absolute tolerance (default: 1e-6)')
    check_parser.add_argument('--output', '-o', type=str,
                              help='Output JSON file')
    check_parser.set_defaults(func=cmd_check)

    # Version command
    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
