"""Describe a cat from the command line.

Usage:
    python examples/cat.py Tom --orange --favorite-food tuna
"""

from valargs import parse


def main():
    args = parse()

    if (cat_name := args.nth(1)) is not None:
        print(f"the cat's name is {cat_name}")

    if args.has_option("orange"):
        print("the cat is an orange cat")

    if (favorite_food := args.option_value("favorite-food")) is not None:
        print(f"the cat likes {favorite_food} a lot")
    else:
        print("no information about the cat's favorite food...")


if __name__ == "__main__":
    main()
