"""Run the housing example.

Trains recipe.yaml on train.csv and prints the processed predictors for
new.csv.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pyarrow.csv as pa_csv

from datarecipe import apply, from_yaml, print_recipe, train
from datarecipe.core.logging import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the housing recipe")
    parser.add_argument(
        "--roles",
        nargs="*",
        default=["predictor"],
        help="Roles to keep in the output",
    )
    args = parser.parse_args()

    here = Path(__file__).parent
    configure_logging(recipe_name="housing")

    training = pa_csv.read_csv(here / "train.csv")
    rec = from_yaml(str(here / "recipe.yaml"), training)
    train(rec, training)
    print_recipe(rec)

    baked = apply(rec, pa_csv.read_csv(here / "new.csv"), roles=args.roles)
    print(baked.to_arrow())


if __name__ == "__main__":
    main()
