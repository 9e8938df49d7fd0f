from typing import List, Union
import matplotlib.pyplot as plt
from wordle_solver.wordle.game import GameRecord
from pathlib import Path
import json
from dataclasses import asdict
import numpy as np
import pandas as pd
from collections import Counter


def write_metrics_to_file(records: List[GameRecord], output_file: Path):
    """
    Appends a list of game records to a .jsonl file.
    Creates the necessary parent directory if it does not exist.

    Args:
        records: A list of GameRecord objects, one per game.
        output_file: The Path object for the output file.
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'a') as f:
        for record in records:
            json_record = json.dumps(asdict(record))
            f.write(json_record + '\n')


def read_metrics_file(jsonl_path: Union[str, Path]) -> List[dict]:
    with open(jsonl_path, 'r') as f:
        all_results = [json.loads(line) for line in f if line.strip()]
    return all_results


def summarize_results(records: List[dict]) -> pd.DataFrame:
    """
    Groups self-play results by `log_type` and computes win rate and turn statistics.

    Returns:
        One row per log type with total_games, total_wins, win_rate (percent),
        avg_turns_on_win and max_turns_on_win.
    """
    results_df = pd.DataFrame(records)
    if results_df.empty:
        return pd.DataFrame(columns=['log_type', 'total_games', 'total_wins', 'win_rate',
                                     'avg_turns_on_win', 'max_turns_on_win'])

    summary = results_df.groupby('log_type').agg(
        total_wins=('solved', lambda x: int(x.sum())),
        total_games=('solved', 'count'),
        avg_turns_on_win=('turns_to_solve', lambda x: x[results_df.loc[x.index, 'solved']].mean()),
        max_turns_on_win=('turns_to_solve', lambda x: x[results_df.loc[x.index, 'solved']].max()),
    ).reset_index()
    summary['win_rate'] = (summary['total_wins'] / summary['total_games']) * 100
    return summary[['log_type', 'total_games', 'total_wins', 'win_rate',
                    'avg_turns_on_win', 'max_turns_on_win']]


def print_summary(summary: pd.DataFrame):
    print("\n" + "="*60 + "\n" + " " * 20 + "SELF-PLAY EVALUATION RESULTS" + "\n" + "="*60)
    for _, row in summary.iterrows():
        print(f"\n--- {row['log_type']} ---")
        print(f"  Win Rate: {row['win_rate']:.2f}% ({row['total_wins']}/{row['total_games']})")
        print(f"  Avg. Turns on Win: {row['avg_turns_on_win']:.2f}")
        print(f"  Max. Turns on Win: {row['max_turns_on_win']}")
    print("\n" + "="*60)


def plot_win_distribution(metrics_file_path: Union[str, Path], show: bool = False) -> Path:
    """
    Generates a bar chart showing the distribution of wins by number of turns.
    """
    log_list = read_metrics_file(metrics_file_path)

    turns = [log['turns_to_solve'] for log in log_list if log['solved']]
    losses = sum(1 for log in log_list if not log['solved'])
    counts = Counter(turns)

    labels = sorted(counts.keys())
    values = [counts[turn] for turn in labels]
    x = np.arange(len(labels))

    fig, ax = plt.subplots(figsize=(12, 7))
    rects = ax.bar(x, values, 0.6, label='Wins', color='cornflowerblue')

    ax.set_ylabel('Number of Games', fontsize=12)
    ax.set_xlabel('Turns to Solve', fontsize=12)
    ax.set_title(f'Distribution of Wins by Number of Turns ({len(log_list)} games, {losses} lost)', fontsize=16)
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.legend()
    ax.bar_label(rects, padding=3)
    fig.tight_layout()

    output_path = Path(metrics_file_path).parent / f"win_distribution_{len(log_list)}_games.png"
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    print(f"Chart saved to {output_path}")
    if show:
        plt.show()
    plt.close(fig)
    return output_path


def plot_pool_shrinkage(metrics_file_path: Union[str, Path], show: bool = False) -> Path:
    """
    Plots the mean candidate pool size after each clue, over all recorded games.
    """
    log_list = read_metrics_file(metrics_file_path)
    max_len = max((len(log['pool_sizes']) for log in log_list), default=0)

    means = []
    for turn in range(max_len):
        sizes = [log['pool_sizes'][turn] for log in log_list if len(log['pool_sizes']) > turn]
        means.append(np.mean(sizes))

    fig, ax = plt.subplots(figsize=(12, 7))
    ax.plot(np.arange(1, max_len + 1), means, marker='o', color='orangered')
    ax.set_yscale('log')
    ax.set_xlabel('Clue Number', fontsize=12)
    ax.set_ylabel('Mean Candidates Remaining', fontsize=12)
    ax.set_title('Candidate Pool Size After Each Clue', fontsize=16)
    ax.grid(True, which='both', linestyle='--', linewidth=0.5)
    fig.tight_layout()

    output_path = Path(metrics_file_path).parent / f"pool_shrinkage_{len(log_list)}_games.png"
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    print(f"Chart saved to {output_path}")
    if show:
        plt.show()
    plt.close(fig)
    return output_path
