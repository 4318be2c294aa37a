"""Generate a dataclass definition from loosely named fields."""

from quill import make

FIELDS = {
    "User ID": "int",
    "display-name": "str",
    "lastLoginAt": "datetime | None",
}


def render(name: str, fields: dict[str, str]) -> str:
    text = make("@dataclass").append_line("class ", make(name).pascal_case(), ":")
    for field, annotation in fields.items():
        text.append_line("    ", make(field).snake_case(), ": ", annotation)
    return text.prepend_lines("from dataclasses import dataclass", "").to_string()


if __name__ == "__main__":
    print(render("user record", FIELDS))
