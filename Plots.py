import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt
import numpy as np

def plot_running_median(values, medians, path=None, title="Running median"):
    # stream values as points, median as a line on top
    steps = np.arange(1, len(values)+1)
    sns.set(style="darkgrid")
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.scatter(steps, values, s=4, alpha=0.3, color="blue", label="value")
    ax.plot(steps, medians, color="red", linewidth=1.5, label="median")
    plt.title(title)
    plt.xlabel("Insertions")
    plt.ylabel("Value")
    plt.legend(bbox_to_anchor=(1, 1), loc='upper left')
    plt.tight_layout()
    if path is not None:
        plt.savefig(path)
        plt.close(fig)
    return fig

def plot_times(df: pd.DataFrame, path=None):
    sns.set(style="darkgrid")
    fig, ax = plt.subplots(figsize=(8, 4))
    sns.barplot(data=df, x="algo", y="time", hue="correct", palette="colorblind", ax=ax)
    plt.title("Runtime per algorithm")
    plt.xlabel("Algorithm")
    plt.ylabel("Time [s]")
    plt.tight_layout()
    if path is not None:
        plt.savefig(path)
        plt.close(fig)
    return fig

if __name__ == "__main__":
    import argparse
    from benchmark.datasets import get_dataset
    from evaluation import evaluate

    parser = argparse.ArgumentParser()
    parser.add_argument("--dataset", default="example")
    args = parser.parse_args()

    with get_dataset(args.dataset) as f:
        values = f["data"][:]
        medians = f["medians"][:]
    plot_running_median(values, medians, f"{args.dataset}_median.png", title=f"{args.dataset} - running median")
    df = evaluate(args.dataset)
    if len(df):
        plot_times(df, f"{args.dataset}_times.png")
