import argparse
import json
import time
from wordle_solver.utils import config as cfg
from wordle_solver.utils.read_files import load_words
from wordle_solver.wordle.knowledge import KnowledgeState
from wordle_solver.wordle.selector import WordPool, score_pool

# =====================================================================
# Rank every word of the list as an opening guess
# =====================================================================

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rank opening guesses by expected remaining candidates.")
    parser.add_argument("--config", type=str, help="Path to the configuration file.")
    parser.add_argument("--top", type=int, default=20, help="How many openings to print.")
    parser.add_argument("--output", type=str, help="Optional JSON file for all scores.")
    args = parser.parse_args()

    config = cfg.load_config_from_file(args.config) if args.config else cfg.default_config()
    config.solver.show_progress = True

    print("Starting pre-computation of opening scores...")
    start_time = time.time()
    pool = WordPool(load_words(config.word_list))
    print(f"Scoring {len(pool)} guesses against {len(pool)} possible answers")

    scored = score_pool(KnowledgeState.empty(), pool, config.solver)
    # Stable sort keeps list order among equal scores
    ranked = sorted(scored, key=lambda item: item[1])

    print(f"\n--- Top {args.top} Opening Guesses (expected candidates left) ---")
    for i, (word, total) in enumerate(ranked[:args.top]):
        print(f"{i+1:2d}. {word}: {total / len(pool):.2f}")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(dict(ranked), f, indent=2)
        print(f"\nSaved scores to {args.output}")

    print(f"Total execution time: {time.time() - start_time:.2f} seconds.")
