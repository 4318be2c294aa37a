"""Build and transform text in a few chained calls."""

from quill import make

greeting = make("Hel").append("lo").space().append("World", "!")
print(greeting)  # Hello World!

print(make("Hello World").snake_case())  # hello_world
print(make("{{ user.name }}").inside("{", "}").trim())  # user.name
print(make("hello world").words())  # ['hello', 'world']
