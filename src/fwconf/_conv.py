import cattrs

from .line import ConfigLine, Comment, Empty, Filter, Property, classify

# Let UnrecognizedLineError propagate instead of being wrapped in a validation group.
converter = cattrs.Converter(detailed_validation=False)

for _cls in (Empty, Comment, Property, Filter):
    converter.register_unstructure_hook(_cls, lambda line: line.text)


def _structure_lines(texts: list[str], _) -> list[ConfigLine]:
    lines = []

    for i, text in enumerate(texts):
        line = classify(text, i)
        if isinstance(line, Filter):
            raise ValueError(f"filter header is not a section member: '{text}'")

        lines.append(line)

    return lines


converter.register_structure_hook_func(
    lambda t: t == list[ConfigLine], _structure_lines
)
