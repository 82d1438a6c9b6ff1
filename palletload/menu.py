"""Interactive text menu for loading datasets and running the selection algorithms."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from os import PathLike
from typing import TextIO

from .brute_force import solve_brute_force
from .dp import solve_dp
from .greedy import solve_greedy
from .ilp import solve_ilp
from .loader import DataLoadError, load_pallets, load_truck
from .models import Pallet, Solution, Truck
from .report import (
    MAX_ALGORITHMS,
    MAX_DATASETS,
    ValidationError,
    algorithm_name,
    dataset_paths,
    format_comparison,
    format_single_result,
    validate_data,
)

_LEADING_INT = re.compile(r"[+-]?\d+")

_SOLVERS: dict[int, Callable[[Sequence[Pallet], Truck], Solution]] = {
    1: solve_greedy,
    2: solve_brute_force,
    3: solve_dp,
    4: solve_ilp,
}

_MAIN_MENU = (
    "\n╔════════════════════════════════════════╗\n"
    "║      Delivery Truck Optimization       ║\n"
    "╠════════════════════════════════════════╣\n"
    "║ 1. Select and Load Dataset             ║\n"
    "║ 2. Select Algorithm                    ║\n"
    "║ 3. Run Selected Algorithm              ║\n"
    "║ 4. Run All Algorithms                  ║\n"
    "║ 5. Display Results                     ║\n"
    "║ 6. Clear Data                          ║\n"
    "║ 7. Help                                ║\n"
    "║ 8. Exit                                ║\n"
    "╚════════════════════════════════════════╝\n"
)

_ALGORITHM_MENU = (
    "\n╔════════════════════════════════════════╗\n"
    "║         Available Algorithms           ║\n"
    "╠════════════════════════════════════════╣\n"
    "║ 1. Greedy                             ║\n"
    "║    - Fast but may not be optimal      ║\n"
    "║ 2. Brute Force                        ║\n"
    "║    - Optimal but slow for large sets  ║\n"
    "║ 3. Dynamic Programming                ║\n"
    "║    - Efficient for medium datasets    ║\n"
    "║ 4. Integer Linear Programming         ║\n"
    "║    - Optimal solution using a solver  ║\n"
    "╚════════════════════════════════════════╝\n"
)

_HELP = (
    "\n╔════════════════════════════════════════╗\n"
    "║             Help Guide                 ║\n"
    "╠════════════════════════════════════════╣\n"
    "║ 1. Select Dataset                      ║\n"
    "║    - Choose from available datasets    ║\n"
    "║ 2. Select Algorithm                    ║\n"
    "║    - Pick an algorithm to use          ║\n"
    "║ 3. Run Selected Algorithm              ║\n"
    "║    - Execute current algorithm         ║\n"
    "║ 4. Run All Algorithms                  ║\n"
    "║    - Execute all algorithms            ║\n"
    "║ 5. Display Results                     ║\n"
    "║    - View comparison of results        ║\n"
    "║ 6. Clear Data                          ║\n"
    "║    - Reset current dataset/algorithm   ║\n"
    "║ 7. Help                                ║\n"
    "║    - Show this help guide              ║\n"
    "║ 8. Exit                                ║\n"
    "║    - Close the program                 ║\n"
    "╚════════════════════════════════════════╝\n\n"
    "📝 Note: You must select a dataset before running algorithms.\n"
    "📊 Tip: Use 'Run All Algorithms' to compare all solutions at once.\n"
)


class Menu:
    """Text menu that loads datasets, runs algorithms and shows their results."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
        datasets_dir: str | PathLike[str] = "datasets",
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output if output is not None else sys.stdout
        self.datasets_dir = datasets_dir
        self.pallets: list[Pallet] = []
        self.truck = Truck()
        self.results: dict[int, Solution] = {}
        self.data_loaded = False
        self.current_dataset = 1
        self.current_algorithm = 1

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_token(self) -> str | None:
        """Return the first word of the next non-blank line, or None at end of input."""
        for line in self._in:
            words = line.split()
            if words:
                return words[0]
        return None

    def _read_int(self) -> int | None:
        token = self._read_token()
        if token is None:
            return None
        match = _LEADING_INT.match(token)
        return int(match.group()) if match else None

    # -- main loop ----------------------------------------------------------

    def run(self) -> None:
        """Show the menu and handle choices until the user exits or input ends."""
        while True:
            self._display_main_menu()
            self._write("\nEnter your choice (1-8): ")
            token = self._read_token()
            if token is None:
                return
            match = _LEADING_INT.match(token)
            if match is None:
                self._write("❌ Invalid input. Please enter a number between 1 and 8.\n")
                continue
            choice = int(match.group())

            if choice == 1:
                self._select_dataset()
            elif choice in (2, 3, 4):
                if not self.data_loaded:
                    self._write("❌ Please load data first!\n")
                elif choice == 2:
                    self._select_algorithm()
                elif choice == 3:
                    self._write(
                        f"\n🚀 Running {algorithm_name(self.current_algorithm)} algorithm...\n"
                    )
                    self.run_algorithm()
                else:
                    self.run_all_algorithms()
            elif choice == 5:
                if self.data_loaded:
                    self._display_results()
                else:
                    self._write(
                        "❌ No results to display! Please run some algorithms first.\n"
                    )
            elif choice == 6:
                if self.data_loaded:
                    self.clear_data()
                else:
                    self._write("❌ No data to clear!\n")
            elif choice == 7:
                self._write(_HELP)
            elif choice == 8:
                self._write("Thank you for using the Delivery Truck Optimization program!\n")
                return
            else:
                self._write("❌ Invalid choice. Please enter a number between 1 and 8.\n")

    def _display_main_menu(self) -> None:
        self._write(_MAIN_MENU)
        if self.data_loaded:
            self._write("\n📦 Current Status:\n")
            self._display_dataset_info()
            self._write(f"🔧 Selected Algorithm: {algorithm_name(self.current_algorithm)}\n")
        else:
            self._write("\n⚠️  Please select and load a dataset first!\n")

    def _display_dataset_info(self) -> None:
        self._write(f"\nCurrent Dataset: {self.current_dataset}\n")
        self._write(f"Truck Capacity: {self.truck.capacity:.2f} kg\n")
        self._write(f"Total Available Pallets: {len(self.pallets)}\n")

    # -- selection ----------------------------------------------------------

    def _select_algorithm(self) -> None:
        self._write(_ALGORITHM_MENU)
        self._write(f"\nSelect algorithm (1-{MAX_ALGORITHMS}): ")
        choice = self._read_int()
        if choice is None or not 1 <= choice <= MAX_ALGORITHMS:
            self._write(
                "❌ Invalid algorithm selection. Please enter a number between 1 and "
                f"{MAX_ALGORITHMS}.\n"
            )
            return
        self.current_algorithm = choice
        self._write(f"✅ Selected algorithm: {algorithm_name(choice)}\n")

    def _select_dataset(self) -> None:
        lines = [
            "\n╔════════════════════════════════════════╗\n",
            "║         Available Datasets             ║\n",
            "╠════════════════════════════════════════╣\n",
        ]
        lines += [
            f"║ {number:>2}. Dataset {number:>2}{' ' * 25}║\n"
            for number in range(1, MAX_DATASETS + 1)
        ]
        lines.append("╚════════════════════════════════════════╝\n")
        self._write("".join(lines))

        self._write(f"\nSelect dataset (1-{MAX_DATASETS}): ")
        choice = self._read_int()
        if choice is None or not 1 <= choice <= MAX_DATASETS:
            self._write(
                "❌ Invalid dataset selection. Please enter a number between 1 and "
                f"{MAX_DATASETS}.\n"
            )
            return
        self.load_data(choice)

    # -- data -----------------------------------------------------------------

    def load_data(self, number: int | None = None) -> bool:
        """Load and validate a numbered dataset; report the outcome and return success."""
        if number is not None:
            self.current_dataset = number
        truck_path, pallet_path = dataset_paths(self.datasets_dir, self.current_dataset)

        if not truck_path.exists() or not pallet_path.exists():
            self._write("Error: Dataset files not found!\n")
            return False

        try:
            truck = load_truck(truck_path)
        except DataLoadError:
            self._write(f"Error loading truck data from {truck_path}!\n")
            return False
        try:
            pallets = load_pallets(pallet_path)
        except DataLoadError:
            self._write(f"Error loading pallet data from {pallet_path}!\n")
            return False

        self.truck = truck
        self.pallets = pallets

        try:
            validate_data(self.truck, self.pallets)
        except ValidationError as exc:
            self._write(f"Error: {exc}\n")
            self._write("Data validation failed. Please check the dataset.\n")
            self.clear_data()
            return False

        self.data_loaded = True
        self._write("Data loaded successfully!\n")
        self._display_dataset_info()
        return True

    def clear_data(self) -> None:
        """Forget the loaded dataset and every stored result."""
        self.pallets = []
        self.truck = Truck()
        self.results.clear()
        self.data_loaded = False
        self._write("✅ Data and results cleared successfully.\n")

    # -- running --------------------------------------------------------------

    def run_algorithm(self, number: int | None = None) -> Solution | None:
        """Run one algorithm on the loaded data, store and show its result.

        Without a number the currently selected algorithm runs. An unknown
        number is reported and nothing is stored.
        """
        if number is not None:
            self.current_algorithm = number
        solver = _SOLVERS.get(self.current_algorithm)
        if solver is None:
            self._write("Invalid algorithm selection!\n")
            return None

        truck = Truck(capacity=self.truck.capacity, loaded_pallets=list(self.truck.loaded_pallets))
        solution = solver(self.pallets, truck)
        self.results[self.current_algorithm] = solution

        self._write("\n✅ Algorithm completed successfully!\n")
        self._write("\n📊 Current Results:\n")
        self._write(format_single_result(solution))
        return solution

    def run_all_algorithms(self) -> dict[int, Solution]:
        """Run every algorithm in turn, replacing earlier results, then compare them."""
        self._write("\n🚀 Running all algorithms...\n\n")
        self.results.clear()
        for number in range(1, MAX_ALGORITHMS + 1):
            self._write(f"Running {algorithm_name(number)}...\n")
            self.run_algorithm(number)
            self._write("\n")
        self._write("✅ All algorithms completed!\n\n")
        self._display_results()
        return dict(self.results)

    def _display_results(self) -> None:
        if not self.results:
            self._write("❌ No results available! Please run some algorithms first.\n")
            return

        self._write(format_comparison(self.results))
        self._write(
            "Would you like to see detailed results for a specific algorithm? (y/n): "
        )
        token = self._read_token()
        if token is None or token[0] not in "yY":
            return

        self._write(f"\nSelect algorithm number (1-{MAX_ALGORITHMS}): ")
        choice = self._read_int()
        if choice is None or not 1 <= choice <= MAX_ALGORITHMS:
            self._write("❌ Invalid algorithm selection.\n")
            return
        solution = self.results.get(choice)
        if solution is None:
            self._write("❌ No results available for this algorithm.\n")
        else:
            self._write(format_single_result(solution))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive menu; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="palletload", description="Select the most profitable pallets for a truck."
    )
    parser.add_argument(
        "--datasets-dir",
        default="datasets",
        help="directory holding the TruckAndPallets_NN.csv and Pallets_NN.csv files",
    )
    args = parser.parse_args(argv)
    try:
        Menu(datasets_dir=args.datasets_dir).run()
    except Exception as exc:  # noqa: BLE001 - top-level report of any failure
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())