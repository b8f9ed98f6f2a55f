# rfdoc

`rfdoc` reads and edits RFD ("Request for Discussion") documents written in
AsciiDoc or Markdown. It pulls the title, state, discussion link, authors and
labels out of a document, updates those attributes in place, replaces the
body, finds AsciiDoc `include::` directives and renders simple RFD templates.
It has no third-party dependencies.

## Installing

```
pip install .
```

## Working with documents

`rfdoc.content.RfdContent` wraps either format behind one interface. Build
one with `RfdContent.from_format(text, ContentFormat.ASCIIDOC)` or
`ContentFormat.MARKDOWN`:

```python
from rfdoc.content import ContentFormat, RfdContent

text = """:state: prediscussion
:labels: storage, networking

= RFD 123 Place
First Last <first@example.com>

Body text.
"""

doc = RfdContent.from_format(text, ContentFormat.ASCIIDOC)
doc.get_title()      # "Place"
doc.get_state()      # "prediscussion"
doc.get_labels()     # "storage, networking"
doc.get_authors()    # "First Last <first@example.com>"
doc.format()         # ContentFormat.ASCIIDOC

doc.update_state("discussion")
doc.update_body("A new body")
print(doc.raw())
```

The `update_*` and `set_raw` methods change the document in place and return
nothing. `header()` gives the text before the title line and `body()` the
text after it (or `None` when there is no title).

The format classes can also be used directly:

- `rfdoc.asciidoc.RfdAsciidoc` reads `:name: value` attributes. It resolves
  `{authors}` references and treats the first line under the title as the
  author line, so `get_authors()` reports the authors whichever way they are
  written. `get_discussion()` only returns links that start with `http`.
  `RfdAsciidoc.attr(name, text)` and `RfdAsciidoc.set_attr(text, name, value)`
  work on plain strings. `includes()` lists the `include::file[]` directives
  as `AsciidocInclude` values; `name()` gives the file and
  `perform_replacement(body, new_content)` returns `body` with every such
  directive replaced by `new_content`.
- `rfdoc.markdown.RfdMarkdown` reads `name: value` attribute lines and
  `#` titles; `attr(name)` and `set_attr(name, value)` work on its content.

Failures while processing AsciiDoc raise `RfdAsciidocError`; through
`RfdContent` they are raised as `RfdContentError`.

## Authors

`rfdoc.authors.RfdAuthors.parse(line)` parses an AsciiDoc author line such as
`One Author <one@example.com>, Two Author <two@example.com>` into
`RfdAuthor` values (`first_name`, `middle_name`, `last_name`, `email`). It
returns `None` for a line that is not a valid author line. `to_attr()` writes
the authors back in the `;`-separated attribute form.

## Numbers and states

```python
from rfdoc.rfd import RfdNumber, RfdState

RfdNumber(42).as_number_string()  # "0042"
RfdNumber(42).repo_path()         # "/rfd/0042"
RfdState.parse("published")       # RfdState.PUBLISHED
```

An unknown state raises `InvalidRfdState`, a `ValueError`.

## Templates

```python
from rfdoc.template import RfdTemplate

template = RfdTemplate(template="= RFD {number} {title}", required_fields=["number", "title"])
rendered = template.field("number", "0042").field("title", "Example").build().render()
# "= RFD 0042 Example"
```

`field()` returns a new template. `build()` raises `MissingRequiredFields`
(a `TemplateError`) listing the required fields that have no value.

## What it does not do

`rfdoc` is a library for document text only. It has no command-line tool,
does not talk to any server or repository, does not fetch or store RFDs, and
does not render AsciiDoc or Markdown to other formats.

## Running the tests

```
pip install .[test]
pytest
```