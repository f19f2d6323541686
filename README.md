# linkresolve

Building blocks for a link checker: turn the raw link text found in a
document into an absolute URL, and check whether a URL's fragment
(`#anchor`) names something that exists in the document it points to.

The package has no dependencies beyond the standard library.

## Installation

```
pip install linkresolve
```

With the test requirements:

```
pip install "linkresolve[test]"
```

## Modules

### `linkresolve.url`

- `remove_get_params_and_separate_fragment(url)` drops the query string from
  a link and splits off its fragment. The link does not need a scheme or
  host. `"test.png?foo=bar#anchor"` gives `("test.png", "anchor")`; a link
  without `#` gives `None` as the fragment. A `?` inside the fragment is kept:
  `"test.png#anchor?x"` gives `("test.png", "anchor?x")`.

### `linkresolve.path`

- `absolute_path(path)` makes a path absolute against the current working
  directory and normalises it lexically (`.` and `..` are folded without
  touching the file system). Results are cached.
- `resolve(src, dst, ignore_absolute_local_links)` resolves `dst` as linked
  from the file `src`. Relative links are looked up in the directory of
  `src`; absolute links return `None` when `ignore_absolute_local_links` is
  true. Raises `InvalidFileError` when `src` has no parent directory.
- `contains(parent, child)` tells whether `child` lies inside `parent`, or is
  `parent` itself. Both paths are resolved on disk first, so both must exist;
  otherwise `FileNotFoundError` is raised.

### `linkresolve.request`

- `is_anchor(text)` is true for link text starting with `#`.
- `resolve_and_create_url(src_path, dest_path, ignore_absolute_local_links)`
  returns a `file://` URL string for `dest_path` as linked from `src_path`.
  The query string is dropped, the fragment is kept, and the path is
  percent-decoded before resolution so it is not encoded twice. Raises
  `InvalidPathToUriError` when the path cannot be decoded or resolved
  (including ignored absolute links).
- `create_uri_from_file_path(file_path, link_text, ignore_absolute_local_links)`
  does the same for link text found in `file_path`; an anchor such as
  `#intro` is attached to the name of that file. Raises `InvalidFileError`
  when an anchor's file has no name, and `InvalidPathToUriError` when no URL
  can be built.
- `prepend_root_dir_if_absolute_local_link(text, root_dir)` prefixes link
  text starting with `/` with `root_dir` when one is given.
- `truncate_source(source)` shortens string sources to 100 characters and
  returns any other value unchanged.

### `linkresolve.fragments`

- `FileType`: `MARKDOWN`, `HTML`, `PLAINTEXT`.
- `FragmentInput(content, file_type)`, a frozen dataclass;
  `FragmentInput.from_path(path, file_type)` reads the file as UTF-8.
- `FragmentChecker(extractors)` takes a mapping from `FileType` to a function
  that returns the set of fragments a document defines.
  `check(input, url)` returns whether the URL's fragment is among them.
  URLs with no fragment, an empty one or `top` (any case) always pass, as do
  plain-text documents and file types without an extractor. Both the raw and
  the percent-decoded fragment are looked up; for Markdown the decoded
  fragment is lowercased first. Extracted fragments are cached per URL
  (without its fragment), guarded by a lock.

### `linkresolve.errors`

- `LinkError`, the base class, with `InvalidFileError`,
  `InvalidPathToUriError` and `InvalidUrlFromPathError`.
- `trim_error_output(text)` keeps only what follows
  `"error trying to connect:"` in an error message, stripped; other messages
  are returned unchanged.

## Examples

```python
from linkresolve.request import resolve_and_create_url

url = resolve_and_create_url("/docs/index.html", "guide.html?v=2#setup", True)
print(url)  # file:///docs/guide.html#setup
```

```python
from linkresolve.fragments import FileType, FragmentChecker, FragmentInput

checker = FragmentChecker({FileType.HTML: lambda text: {"intro"}})
page = FragmentInput(content="<h1 id='intro'>Hi</h1>", file_type=FileType.HTML)
assert checker.check(page, "file:///site/index.html#intro")
assert not checker.check(page, "file:///site/index.html#missing")
```

## What this package does not do

- It sends no HTTP requests and checks no remote links; it only builds URLs
  and checks fragments against documents you supply.
- It does not find links or anchors in HTML or Markdown itself: the fragment
  extractors passed to `FragmentChecker` are yours to provide.
- It has no command-line tool.