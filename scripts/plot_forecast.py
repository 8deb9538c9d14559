#!/usr/bin/env python3
"""
Forecast chart generator.

Produces a 2-panel chart from a forecast_report.py CSV:
  1. Perfect-day score per day with the strong-day threshold, strong days
     marked green and caution days marked orange
  2. Confidence per day

Usage:
    python scripts/plot_forecast.py --file logs/forecast_1990-05-15_2026-01-01_90d.csv
    python scripts/plot_forecast.py --file logs/forecast_1990-05-15_2026-01-01_90d.csv \\
        --title "Q1 outlook" --out logs/chart_q1.png
"""
import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless; we save to file

import matplotlib.dates as mdates
import matplotlib.gridspec as gridspec
import matplotlib.pyplot as plt
import pandas as pd

# ── Allow importing from project root ─────────────────────────────────────────
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

import config

# ── Colour palette (dark theme) ────────────────────────────────────────────────
BG       = "#0d1117"
SURFACE  = "#161b22"
BORDER   = "#30363d"
TEXT     = "#e6edf3"
MUTED    = "#8b949e"
BLUE     = "#58a6ff"
GREEN    = "#3fb950"
ORANGE   = "#d29922"
PURPLE   = "#bc8cff"


# ─────────────────────────────────────────────────────────────────────────────
def load_csv(path: str) -> pd.DataFrame:
    df = pd.read_csv(path)
    df["date"] = pd.to_datetime(df["date"])
    for col in ("strong_day", "caution_day"):
        if col not in df.columns:
            df[col] = False
    return df.set_index("date").sort_index()


def make_chart(df: pd.DataFrame, title: str, out_path: Path, threshold: int = config.FORECAST_MIN_SCORE):
    fig = plt.figure(figsize=(14, 8), facecolor=BG)
    gs = gridspec.GridSpec(2, 1, figure=fig, height_ratios=[2, 1], hspace=0.08)
    ax_score = fig.add_subplot(gs[0])
    ax_conf = fig.add_subplot(gs[1], sharex=ax_score)

    for ax in (ax_score, ax_conf):
        ax.set_facecolor(SURFACE)
        ax.tick_params(colors=MUTED, labelsize=8)
        for spine in ax.spines.values():
            spine.set_edgecolor(BORDER)
        ax.grid(True, color=BORDER, linewidth=0.5, linestyle="--", alpha=0.6)
        ax.yaxis.label.set_color(MUTED)
        ax.set_ylim(0, 100)

    # ── [1] Perfect-day score ─────────────────────────────────────────────────
    ax_score.plot(df.index, df["perfect_day"], color=BLUE, linewidth=1.4, zorder=3,
                  label="Perfect day")
    ax_score.axhline(threshold, color=MUTED, linewidth=0.8, linestyle=":",
                     label=f"Strong-day threshold ({threshold})")
    strong = df[df["strong_day"]]
    caution = df[df["caution_day"]]
    ax_score.scatter(strong.index, strong["perfect_day"], color=GREEN, s=30, zorder=5,
                     label="Strong day")
    ax_score.scatter(caution.index, caution["perfect_day"], color=ORANGE, marker="v", s=40,
                     zorder=6, label="Caution day")
    ax_score.set_ylabel("Score", fontsize=9)
    ax_score.legend(loc="lower left", fontsize=8, facecolor=SURFACE, edgecolor=BORDER,
                    labelcolor=TEXT)
    ax_score.set_title(f"  {title} — Energy Alignment Forecast  ", fontsize=14,
                       fontweight="bold", color=TEXT, loc="left", pad=10)
    ax_score.tick_params(labelbottom=False)

    # ── [2] Confidence ────────────────────────────────────────────────────────
    ax_conf.fill_between(df.index, df["confidence"], 0, color=PURPLE, alpha=0.25, zorder=2)
    ax_conf.plot(df.index, df["confidence"], color=PURPLE, linewidth=1.0, zorder=3)
    ax_conf.set_ylabel("Confidence", fontsize=9)
    ax_conf.xaxis.set_major_formatter(mdates.DateFormatter("%d %b"))

    # ── Summary stats box ──────────────────────────────────────────────────────
    txt = (
        f"Days: {len(df)}    "
        f"Mean: {df['perfect_day'].mean():.1f}    "
        f"Strong: {int(df['strong_day'].sum())}    "
        f"Caution: {int(df['caution_day'].sum())}"
    )
    fig.text(0.5, 0.965, txt, ha="center", va="top", fontsize=9.5,
             color=TEXT, fontfamily="monospace",
             bbox=dict(facecolor=SURFACE, edgecolor=BORDER, boxstyle="round,pad=0.4"))

    plt.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=BG)
    plt.close(fig)
    print(f"\n✓  Chart saved → {out_path.resolve()}")


# ─────────────────────────────────────────────────────────────────────────────
def main():
    parser = argparse.ArgumentParser(description="Energy alignment forecast chart")
    parser.add_argument("--file", required=True, help="CSV written by forecast_report.py")
    parser.add_argument("--title", default="Outlook", help="Chart title")
    parser.add_argument("--out", default="", help="Output PNG path (auto if blank)")
    parser.add_argument("--threshold", type=int, default=config.FORECAST_MIN_SCORE)
    args = parser.parse_args()

    out_path = (
        Path(args.out)
        if args.out
        else Path(config.LOG_DIR) / f"chart_{args.title.replace(' ', '_').lower()}.png"
    )
    out_path.parent.mkdir(parents=True, exist_ok=True)

    df = load_csv(args.file)
    if df.empty:
        print(f"No rows in {args.file}, nothing to plot.")
        return
    make_chart(df, args.title, out_path, threshold=args.threshold)


if __name__ == "__main__":
    main()
