# oxtools

A library of plugins for the development workflow of Go web applications:
composing build and test commands, fixing a project layout, writing the files
a new application starts with, and generating database migration files.

## Installation

    pip install oxtools

## What is included

- **Migrations** – `oxtools.migrations.Generator` writes a pair of up/down
  migration files into `<root>/migrations`. The migration name (`args[2]`)
  is pluralized and underscored; further arguments that do not start with
  `-` are column definitions such as `email` or `age:int`. The type is
  chosen with `--type`/`-t` through `Generator.parse_flags`; `fizz` is the
  default. Creators are collected with `Generator.receive`.
- **Fizz content** – `oxtools.fizz.generators.generator_for(name)` picks a
  generator from the migration name: `add_<x>_to_<table>` (`AddColumn`),
  `change_<table>_<column>` (`ChangeColumn`), `create_table_<table>`
  (`CreateTable`, also the default), `drop_table_<table>` (`DropTable`),
  `rename_table_<a>_to_<b>`, `rename_column_<a>_to_<b>_from_<table>`,
  `rename_index_<a>_to_<b>_from_<table>` (`Rename`) and
  `drop_index_<index>_from_<table>` (`DropIndex`). Each returns the up and
  down content and raises a `FizzError` subclass on bad input.
  `oxtools.fizz.columns` maps type names to column types and holds the
  `underscore`, `pluralize` and `singularize` helpers.
- **Creators** – `oxtools.fizz.creator.FizzCreator` writes
  `<timestamp>_<name>.up.fizz` and `.down.fizz`;
  `oxtools.sqlcreator.SqlCreator` writes two empty `.sql` files.
- **Standard Go tooling** – `oxtools.standard` holds a `Builder` that puts
  together and runs `go build` arguments (`-o`/`--output`, `--tags`,
  `--static`), a `Tester` that runs `go test` (adding `-p 1` and `./...`
  when not given), a `Fixer` that moves `main.go` to
  `cmd/<module>/main.go`, and `GoModAfterGenerator` / `AfterInitializer`,
  which run `go mod tidy`.
- **Front end** – `oxtools.webpack.WebpackPlugin` runs the `build` or `dev`
  script with yarn or npm, depending on the lock file found;
  `oxtools.yarn.YarnPlugin` runs `yarn install` before a build when
  `yarn.lock` exists.
- **Environment** – `oxtools.environment` sets `GO_ENV` and `NODE_ENV`
  before developing, testing or building.
- **Initializers** – `oxtools.git.GitInitializer` (`.gitkeep` files),
  `oxtools.git.GitAfterInitializer` (`git init`),
  `oxtools.inflections.InflectionsInitializer` (`inflections.yml`),
  `oxtools.refresh.RefreshInitializer` (`.buffalo.dev.yml`) and
  `oxtools.migrations.SodaInitializer` (the migrations folder).
- **Live-reload settings** – `oxtools.refresh.RefreshConfig` reads and
  writes the YAML configuration; `RefreshPlugin.config` returns it from
  `.buffalo.dev.yml` or a default built from the module name.
- **Registry** – `oxtools.registry.base_plugins()` returns a fresh base set
  of plugins, with the migration generator already given the creators.

## Example

    from oxtools.migrations import Generator
    from oxtools.fizz.creator import FizzCreator
    from oxtools.sqlcreator import SqlCreator

    generator = Generator()
    generator.receive([FizzCreator(), SqlCreator()])

    args = ["generate", "migration", "users", "email", "age:int"]
    generator.parse_flags(args)
    generator.generate(".", args)

This writes `migrations/<timestamp>_users.up.fizz` and
`migrations/<timestamp>_users.down.fizz`.

A single migration can also be produced in memory:

    from oxtools.fizz.generators import generator_for

    up, down = generator_for("add_email_to_users").generate(
        "add_email_to_users", ["email"]
    )

## What it does not do

- There is no command-line program; the plugins are called from Python.
- It does not connect to databases: there is no create, drop, reset or
  migrate operation, only the writing of migration files.
- It does not watch files or rebuild the application; `oxtools.refresh`
  only provides the configuration for such a tool.
- It has no task runner and no Dockerfile, `go.mod` or other template-based
  initializers.

## Tests

    pip install oxtools[test]
    pytest