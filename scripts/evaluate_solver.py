import argparse
import time
from pathlib import Path
from wordle_solver.utils import config as cfg
from wordle_solver.utils.logging import plot_pool_shrinkage, plot_win_distribution, print_summary, read_metrics_file, summarize_results
from wordle_solver.utils.read_files import load_words
from wordle_solver.sim.self_play import evaluate_solver


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play the solver against hidden words from the list and report its win rate.")
    parser.add_argument("--config", type=str, required=True, help="Path to the configuration file.")
    parser.add_argument("--num-games", type=int, help="Override evaluation.num_games.")
    parser.add_argument("--plot", action="store_true", help="Save win-distribution and pool-size charts.")
    parser.add_argument("--debug", action="store_true", help="Print every tenth game turn by turn.")
    args = parser.parse_args()

    config = cfg.load_config_from_file(args.config)
    if args.num_games:
        config.evaluation.num_games = args.num_games

    eval_timestamp = time.strftime("%Y%m%d-%H%M%S")
    base = Path(config.evaluation.metrics_file)
    metrics_file = base.parent / f"{base.stem}_{eval_timestamp}{base.suffix}"

    start_time = time.time()
    words = load_words(config.word_list)
    evaluate_solver(config, words, metrics_file=metrics_file, print_debug=args.debug)

    print_summary(summarize_results(read_metrics_file(metrics_file)))
    print(f"Total execution time: {time.time() - start_time:.2f} seconds.")

    if args.plot:
        plot_win_distribution(metrics_file)
        plot_pool_shrinkage(metrics_file)
