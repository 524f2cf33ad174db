"""Free-threading safe: tokenize 1000 snippets in parallel."""

from concurrent.futures import ThreadPoolExecutor

from tinta import tokenize

snippets = [f"let x{i} = {i};\nprintln!(\"{{}}\", x{i});" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda code: tokenize(code, "rust"), snippets))

print(f"Tokenized {len(results)} snippets in parallel")
print("First snippet tokens:", sum(len(line) for line in results[0]))
