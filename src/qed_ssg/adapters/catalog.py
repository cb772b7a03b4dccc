"""Built-in catalogue of SSG toolchain bindings.

Each entry is an AdapterSpec: which binary to run and how every operation
maps onto its command line. The list is static; ``CATALOG`` is the single
registration point and adapter names are checked for uniqueness when a
registry is built from it.

Argument vectors follow each tool's documented CLI closely enough for the
common workflow (init, build, preview) but are not an exhaustive grammar.
Julia entries hand the interpreter a fixed ``-e`` snippet; caller input only
ever reaches it through ``ARGS``, never through the snippet text.
"""

from __future__ import annotations

from qed_ssg.adapters.base import AdapterSpec
from qed_ssg.tools.builder import OperationSpec, ParamSpec

# =============================================================================
# Shared parameter helpers
# =============================================================================


def _site(required: bool = False) -> ParamSpec:
    """Site root, used as the child's working directory."""
    return ParamSpec(
        "path",
        description="Site root directory (defaults to the current directory)",
        required=required,
        cwd=True,
    )


def _new_dir(description: str = "Directory to create the new site in") -> ParamSpec:
    return ParamSpec("path", description=description, required=True, positional=True)


def _positional_dir(description: str = "Project directory") -> ParamSpec:
    return ParamSpec("path", description=description, positional=True)


def _output(flag: str) -> ParamSpec:
    return ParamSpec("output", description="Output directory for the generated site", flag=flag)


def _port(flag: str, default: int | None = None) -> ParamSpec:
    return ParamSpec(
        "port",
        type="integer",
        description="Port for the preview server",
        default=default,
        flag=flag,
    )


def _positional_port(default: int) -> ParamSpec:
    return ParamSpec(
        "port",
        type="integer",
        description="Port for the preview server",
        default=default,
        positional=True,
    )


def _bool(name: str, flag: str, description: str) -> ParamSpec:
    return ParamSpec(name, type="boolean", description=description, flag=flag)


# =============================================================================
# Rust
# =============================================================================

ZOLA = AdapterSpec(
    name="zola",
    display_name="Zola",
    language="Rust",
    description="Fast static site generator in a single binary with everything built-in",
    binary="zola",
    homepage="https://www.getzola.org",
    operations=(
        OperationSpec(
            "init",
            "Create a new Zola site in the given directory",
            args=("init",),
            params=(
                _new_dir(),
                _bool("force", "--force", "Initialize even if the directory is not empty"),
            ),
        ),
        OperationSpec(
            "build",
            "Build the site into the output directory",
            args=("build",),
            kind="build",
            params=(
                _site(),
                _output("--output-dir"),
                ParamSpec("base_url", description="Override base_url from config", flag="--base-url"),
                _bool("drafts", "--drafts", "Include drafts"),
                _bool("force", "--force", "Overwrite a non-empty output directory"),
            ),
        ),
        OperationSpec(
            "serve",
            "Start the live-reloading development server",
            args=("serve",),
            kind="serve",
            params=(
                _site(),
                _port("--port", 1111),
                ParamSpec("interface", description="Interface to bind", flag="--interface"),
                _bool("drafts", "--drafts", "Include drafts"),
            ),
        ),
        OperationSpec(
            "check",
            "Check the site for broken links and configuration errors",
            args=("check",),
            params=(_site(), _bool("drafts", "--drafts", "Include drafts")),
        ),
    ),
)

COBALT = AdapterSpec(
    name="cobalt",
    display_name="Cobalt",
    language="Rust",
    description="Straightforward static site generator inspired by Jekyll",
    binary="cobalt",
    homepage="https://cobalt-org.github.io",
    operations=(
        OperationSpec("init", "Create a new Cobalt site", args=("init",), params=(_new_dir(),)),
        OperationSpec(
            "build",
            "Build the site",
            args=("build",),
            kind="build",
            params=(
                _site(),
                _output("--destination"),
                _bool("drafts", "--drafts", "Include drafts"),
            ),
        ),
        OperationSpec(
            "serve",
            "Build and serve the site with live reload",
            args=("serve",),
            kind="serve",
            params=(
                _site(),
                _port("--port", 3000),
                ParamSpec("host", description="Host to bind", flag="--host"),
            ),
        ),
        OperationSpec(
            "new",
            "Create a new post or page",
            args=("new",),
            params=(
                _site(),
                ParamSpec("title", description="Title of the document", required=True, positional=True),
            ),
        ),
        OperationSpec("clean", "Remove the generated site", args=("clean",), params=(_site(),)),
    ),
)

MDBOOK = AdapterSpec(
    name="mdbook",
    display_name="mdBook",
    language="Rust",
    description="Create books from Markdown files, like GitBook",
    binary="mdbook",
    homepage="https://rust-lang.github.io/mdBook",
    operations=(
        OperationSpec(
            "init",
            "Create the boilerplate structure of a new book",
            args=("init",),
            params=(
                _new_dir("Directory to create the book in"),
                ParamSpec("title", description="Title for the book", flag="--title"),
                _bool("force", "--force", "Skip confirmation prompts"),
            ),
        ),
        OperationSpec(
            "build",
            "Build the book",
            args=("build",),
            kind="build",
            params=(_positional_dir("Book root directory"), _output("--dest-dir")),
        ),
        OperationSpec(
            "serve",
            "Serve the book and rebuild on changes",
            args=("serve",),
            kind="serve",
            params=(
                _positional_dir("Book root directory"),
                _port("--port", 3000),
                ParamSpec("hostname", description="Hostname to bind", flag="--hostname"),
            ),
        ),
        OperationSpec(
            "test",
            "Test the Rust code samples in the book",
            args=("test",),
            params=(_positional_dir("Book root directory"),),
        ),
        OperationSpec(
            "clean",
            "Delete the built book",
            args=("clean",),
            params=(_positional_dir("Book root directory"),),
        ),
    ),
)

# =============================================================================
# Haskell
# =============================================================================

HAKYLL = AdapterSpec(
    name="hakyll",
    display_name="Hakyll",
    language="Haskell",
    description="Haskell library for generating static sites, driven through stack",
    binary="stack",
    homepage="https://jaspervdj.be/hakyll",
    operations=(
        OperationSpec(
            "init",
            "Scaffold a new Hakyll site with hakyll-init",
            args=("exec", "--", "hakyll-init"),
            params=(_new_dir(),),
        ),
        OperationSpec(
            "build",
            "Compile the site generator and build the site",
            args=("exec", "site", "--", "build"),
            kind="build",
            params=(_site(),),
        ),
        OperationSpec(
            "rebuild",
            "Clean and build the site again",
            args=("exec", "site", "--", "rebuild"),
            kind="build",
            params=(_site(),),
        ),
        OperationSpec(
            "watch",
            "Build, serve and watch the site for changes",
            args=("exec", "site", "--", "watch"),
            kind="serve",
            params=(_site(), _port("--port", 8000)),
        ),
        OperationSpec(
            "check",
            "Check the generated site for dead links",
            args=("exec", "site", "--", "check"),
            params=(_site(),),
        ),
        OperationSpec(
            "clean",
            "Remove the generated site and cache",
            args=("exec", "site", "--", "clean"),
            params=(_site(),),
        ),
    ),
)

EMA = AdapterSpec(
    name="ema",
    display_name="Ema",
    language="Haskell",
    description="Static site generator library with hot reload, run through cabal",
    binary="cabal",
    homepage="https://ema.srid.ca",
    operations=(
        OperationSpec(
            "init",
            "Initialize a cabal project in an existing directory",
            args=("init", "--non-interactive", "--exe"),
            params=(_site(required=True),),
        ),
        OperationSpec(
            "build",
            "Generate the static site",
            args=("run", "--", "gen"),
            kind="build",
            params=(
                _site(),
                ParamSpec(
                    "output",
                    description="Output directory for the generated site",
                    default="_site",
                    positional=True,
                ),
            ),
        ),
        OperationSpec(
            "serve",
            "Run the live server with hot reload",
            args=("run", "--", "run"),
            kind="serve",
            params=(_site(), _port("--port", 9001)),
        ),
        OperationSpec(
            "deps",
            "Build only the project's dependencies",
            args=("build", "--only-dependencies"),
            kind="build",
            params=(_site(),),
        ),
        OperationSpec("clean", "Remove build artifacts", args=("clean",), params=(_site(),)),
    ),
)

# =============================================================================
# Elixir
# =============================================================================

SERUM = AdapterSpec(
    name="serum",
    display_name="Serum",
    language="Elixir",
    description="Simple static website generator written in Elixir",
    binary="mix",
    homepage="https://dalgona.github.io/Serum",
    operations=(
        OperationSpec(
            "init",
            "Create a new Serum project",
            args=("serum.new",),
            params=(_new_dir(), _bool("force", "--force", "Overwrite existing files")),
        ),
        OperationSpec(
            "build",
            "Build the website",
            args=("serum.build",),
            kind="build",
            params=(_site(), _output("--output")),
        ),
        OperationSpec(
            "serve",
            "Start the development server",
            args=("serum.server",),
            kind="serve",
            params=(_site(), _port("--port", 8080)),
        ),
        OperationSpec("deps", "Fetch project dependencies", args=("deps.get",), params=(_site(),)),
    ),
)

TABLEAU = AdapterSpec(
    name="tableau",
    display_name="Tableau",
    language="Elixir",
    description="Static site generator for Elixir built on Mix tasks",
    binary="mix",
    homepage="https://github.com/elixir-tools/tableau",
    operations=(
        OperationSpec(
            "init",
            "Generate a new Tableau site",
            args=("tableau.new",),
            params=(
                _new_dir(),
                ParamSpec("template", description="Template engine (heex, temple, eex)", flag="--template"),
            ),
        ),
        OperationSpec(
            "build",
            "Build the site",
            args=("tableau.build",),
            kind="build",
            params=(_site(), _output("--out")),
        ),
        OperationSpec(
            "serve",
            "Run the development server with live reload",
            args=("tableau.server",),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec("deps", "Fetch project dependencies", args=("deps.get",), params=(_site(),)),
    ),
)

NIMBLE_PUBLISHER = AdapterSpec(
    name="nimble-publisher",
    display_name="NimblePublisher",
    language="Elixir",
    description="Minimal filesystem-based publishing engine with Markdown support",
    binary="mix",
    homepage="https://github.com/dashbitco/nimble_publisher",
    operations=(
        OperationSpec(
            "init",
            "Create a new Mix project to host the publisher",
            args=("new",),
            params=(_new_dir(), _bool("sup", "--sup", "Generate an OTP supervision tree")),
        ),
        OperationSpec(
            "build",
            "Compile the project, rendering all published content",
            args=("compile",),
            kind="build",
            params=(_site(), _bool("force", "--force", "Recompile everything")),
        ),
        OperationSpec(
            "serve",
            "Start the Phoenix server hosting the content",
            args=("phx.server",),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec("test", "Run the project's tests", args=("test",), params=(_site(),)),
        OperationSpec("deps", "Fetch project dependencies", args=("deps.get",), params=(_site(),)),
    ),
)

# =============================================================================
# Clojure
# =============================================================================

CRYOGEN = AdapterSpec(
    name="cryogen",
    display_name="Cryogen",
    language="Clojure",
    description="Simple static site generator built with Clojure and Leiningen",
    binary="lein",
    version_args=("version",),
    homepage="https://cryogenweb.org",
    operations=(
        OperationSpec(
            "init",
            "Create a new Cryogen site from the Leiningen template",
            args=("new", "cryogen"),
            params=(_new_dir(),),
        ),
        OperationSpec("build", "Compile the site", args=("run",), kind="build", params=(_site(),)),
        OperationSpec(
            "serve",
            "Serve the site and recompile on changes",
            args=("serve",),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec(
            "serve_fast",
            "Serve the site recompiling only changed content",
            args=("serve:fast",),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec("clean", "Remove compiled output", args=("clean",), params=(_site(),)),
    ),
)

PERUN = AdapterSpec(
    name="perun",
    display_name="Perun",
    language="Clojure",
    description="Composable static site generator built as Boot tasks",
    binary="boot",
    homepage="https://perun.io",
    operations=(
        OperationSpec(
            "init",
            "Generate a new Perun project from the boot-new template",
            args=("-d", "boot/new", "new", "-t", "perun", "-n"),
            params=(ParamSpec("name", description="Project name", required=True, positional=True), _site()),
        ),
        OperationSpec("build", "Run the project's build task", args=("build",), kind="build", params=(_site(),)),
        OperationSpec(
            "serve",
            "Run the development task with a local server",
            args=("dev",),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec("deps", "Show the dependency graph", args=("show", "--deps"), params=(_site(),)),
    ),
)

BABASHKA = AdapterSpec(
    name="babashka",
    display_name="quickblog (Babashka)",
    language="Clojure",
    description="Light-weight static blog engine running on Babashka",
    binary="bb",
    homepage="https://github.com/borkdude/quickblog",
    operations=(
        OperationSpec(
            "init",
            "Create the first post of a new quickblog",
            args=("quickblog", "new"),
            params=(
                _site(required=True),
                ParamSpec("file", description="Post file name", default="hello-world.md", flag="--file"),
                ParamSpec("title", description="Post title", default="Hello world", flag="--title"),
            ),
        ),
        OperationSpec(
            "build",
            "Render the blog",
            args=("quickblog", "render"),
            kind="build",
            params=(_site(), _output("--out-dir")),
        ),
        OperationSpec(
            "serve",
            "Serve the rendered blog",
            args=("quickblog", "serve"),
            kind="serve",
            params=(_site(), _port("--port", 1888)),
        ),
        OperationSpec(
            "watch",
            "Re-render on changes and serve with live reload",
            args=("quickblog", "watch"),
            kind="serve",
            params=(_site(),),
        ),
    ),
)

# =============================================================================
# Julia
# =============================================================================

FRANKLIN = AdapterSpec(
    name="franklin",
    display_name="Franklin.jl",
    language="Julia",
    description="Static site generator for technical blogging with Julia",
    binary="julia",
    homepage="https://franklinjl.org",
    operations=(
        OperationSpec(
            "init",
            "Create a new Franklin site from a template",
            args=("-e", "using Franklin; newsite(ARGS[1]; template=ARGS[2])"),
            params=(
                _new_dir(),
                ParamSpec("template", description="Site template", default="basic", positional=True),
            ),
        ),
        OperationSpec(
            "build",
            "Build and optimize the site (prerender, minify)",
            args=("-e", "using Franklin; optimize()"),
            kind="build",
            params=(_site(),),
        ),
        OperationSpec(
            "serve",
            "Serve the site with live reload",
            args=("-e", "using Franklin; serve(port=parse(Int, ARGS[1]), launch=false)"),
            kind="serve",
            params=(_site(), _positional_port(8000)),
        ),
        OperationSpec(
            "check",
            "Verify internal and external links",
            args=("-e", "using Franklin; verify_links()"),
            params=(_site(),),
        ),
    ),
)

DOCUMENTER = AdapterSpec(
    name="documenter",
    display_name="Documenter.jl",
    language="Julia",
    description="Documentation generator for Julia packages",
    binary="julia",
    homepage="https://documenter.juliadocs.org",
    operations=(
        OperationSpec(
            "init",
            "Generate a docs/ skeleton for a package",
            args=("-e", "using DocumenterTools; DocumenterTools.generate(ARGS[1])"),
            params=(_new_dir("Directory to create docs in"),),
        ),
        OperationSpec(
            "build",
            "Run docs/make.jl to build the documentation",
            args=("--project=docs", "docs/make.jl"),
            kind="build",
            params=(_site(),),
        ),
        OperationSpec(
            "serve",
            "Serve docs with live rebuild through LiveServer",
            args=("-e", "using LiveServer; servedocs(port=parse(Int, ARGS[1]))"),
            kind="serve",
            params=(_site(), _positional_port(8000)),
        ),
        OperationSpec(
            "deps",
            "Instantiate the docs environment",
            args=("--project=docs", "-e", "using Pkg; Pkg.instantiate()"),
            params=(_site(),),
        ),
    ),
)

STATICWEBPAGES = AdapterSpec(
    name="staticwebpages",
    display_name="StaticWebPages.jl",
    language="Julia",
    description="Academic website generator written in Julia",
    binary="julia",
    homepage="https://github.com/Humans-of-Julia/StaticWebPages.jl",
    operations=(
        OperationSpec(
            "init",
            "Create a new Julia project for the site",
            args=("-e", "using Pkg; Pkg.generate(ARGS[1])"),
            params=(_new_dir(),),
        ),
        OperationSpec(
            "build",
            "Run the site script to export the pages",
            args=("--project=.", "site.jl"),
            kind="build",
            params=(_site(),),
        ),
        OperationSpec(
            "serve",
            "Serve the exported pages",
            args=("-e", "using LiveServer; serve(port=parse(Int, ARGS[1]))"),
            kind="serve",
            params=(_site(), _positional_port(8000)),
        ),
        OperationSpec(
            "deps",
            "Instantiate the project environment",
            args=("--project=.", "-e", "using Pkg; Pkg.instantiate()"),
            params=(_site(),),
        ),
    ),
)

# =============================================================================
# Scala
# =============================================================================

LAIKA = AdapterSpec(
    name="laika",
    display_name="Laika",
    language="Scala",
    description="Site and e-book generator for Scala, driven through sbt",
    binary="sbt",
    homepage="https://typelevel.org/Laika",
    operations=(
        OperationSpec(
            "init",
            "Create a new sbt project from a giter8 template",
            args=("new", "scala/scala3.g8"),
            params=(
                _site(required=True),
                ParamSpec("name", description="Project name", required=True, flag="--name="),
            ),
        ),
        OperationSpec("build", "Generate the site", args=("laikaSite",), kind="build", params=(_site(),)),
        OperationSpec(
            "serve",
            "Start the preview server",
            args=("laikaPreview",),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec("pdf", "Render the site as PDF", args=("laikaPDF",), kind="build", params=(_site(),)),
        OperationSpec("clean", "Remove build output", args=("clean",), params=(_site(),)),
    ),
)

SCALATEX = AdapterSpec(
    name="scalatex",
    display_name="Scalatex",
    language="Scala",
    description="Programmable, typesafe document generation in Scala",
    binary="sbt",
    homepage="https://com-lihaoyi.github.io/Scalatex",
    operations=(
        OperationSpec(
            "init",
            "Create a new sbt project from a giter8 template",
            args=("new", "scala/scala-seed.g8"),
            params=(
                _site(required=True),
                ParamSpec("name", description="Project name", required=True, flag="--name="),
            ),
        ),
        OperationSpec("build", "Render the documents", args=("run",), kind="build", params=(_site(),)),
        OperationSpec(
            "watch",
            "Re-render on every source change",
            args=("~run",),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec("clean", "Remove build output", args=("clean",), params=(_site(),)),
    ),
)

# =============================================================================
# Racket
# =============================================================================

FROG = AdapterSpec(
    name="frog",
    display_name="Frog",
    language="Racket",
    description="Static blog generator implemented in Racket",
    binary="raco",
    version_args=("frog", "--version"),
    homepage="https://github.com/greghendershott/frog",
    operations=(
        OperationSpec("init", "Create a new Frog project", args=("frog", "--init"), params=(_site(required=True),)),
        OperationSpec("build", "Build the blog", args=("frog", "--build"), kind="build", params=(_site(),)),
        OperationSpec(
            "serve",
            "Serve the blog locally",
            args=("frog", "--serve"),
            kind="serve",
            params=(_site(), _port("--port", 3000)),
        ),
        OperationSpec(
            "new_post",
            "Create a new Markdown post",
            args=("frog", "--new"),
            params=(_site(), ParamSpec("title", description="Post title", required=True, positional=True)),
        ),
        OperationSpec("clean", "Delete generated files", args=("frog", "--clean"), params=(_site(),)),
    ),
)

POLLEN = AdapterSpec(
    name="pollen",
    display_name="Pollen",
    language="Racket",
    description="Publishing system for web-based books written in Racket",
    binary="raco",
    version_args=("pollen", "version"),
    homepage="https://docs.racket-lang.org/pollen",
    operations=(
        OperationSpec(
            "init",
            "Precompile a Pollen project directory",
            args=("pollen", "setup"),
            params=(_positional_dir(),),
        ),
        OperationSpec(
            "build",
            "Render the project",
            args=("pollen", "render"),
            kind="build",
            params=(_bool("recursive", "-r", "Render subdirectories too"), _positional_dir()),
        ),
        OperationSpec(
            "serve",
            "Start the project server",
            args=("pollen", "start"),
            kind="serve",
            params=(_positional_dir(), _positional_port(8080)),
        ),
        OperationSpec(
            "publish",
            "Copy the rendered project to a publish directory",
            args=("pollen", "publish"),
            kind="build",
            params=(
                ParamSpec("path", description="Project directory", required=True, positional=True),
                ParamSpec("output", description="Destination directory", positional=True),
            ),
        ),
        OperationSpec("clean", "Reset the compile cache", args=("pollen", "reset"), params=(_positional_dir(),)),
    ),
)

# =============================================================================
# Other ecosystems
# =============================================================================

COLESLAW = AdapterSpec(
    name="coleslaw",
    display_name="Coleslaw",
    language="Common Lisp",
    description="Flexible Lisp blogware similar to Frog and Jekyll",
    binary="coleslaw",
    homepage="https://github.com/coleslaw-org/coleslaw",
    operations=(
        OperationSpec("init", "Write a starter .coleslawrc", args=("setup",), params=(_site(required=True),)),
        OperationSpec("build", "Generate the blog", args=("generate",), kind="build", params=(_site(),)),
        OperationSpec("serve", "Preview the blog locally", args=("preview",), kind="serve", params=(_site(),)),
        OperationSpec("watch", "Regenerate on changes", args=("watch",), kind="serve", params=(_site(),)),
    ),
)

FORNAX = AdapterSpec(
    name="fornax",
    display_name="Fornax",
    language="F#",
    description="Scriptable static site generator using type-safe F# DSLs",
    binary="fornax",
    version_args=("version",),
    homepage="https://github.com/ionide/Fornax",
    operations=(
        OperationSpec("init", "Create a new Fornax site", args=("new",), params=(_site(required=True),)),
        OperationSpec("build", "Build the site", args=("build",), kind="build", params=(_site(),)),
        OperationSpec(
            "serve",
            "Watch, rebuild and serve the site",
            args=("watch",),
            kind="serve",
            params=(_site(), _port("--port", 8080)),
        ),
        OperationSpec("clean", "Remove generated output", args=("clean",), params=(_site(),)),
    ),
)

ORCHID = AdapterSpec(
    name="orchid",
    display_name="Orchid",
    language="Kotlin",
    description="Documentation and site generator for the JVM, run as Gradle tasks",
    binary="gradle",
    homepage="https://orchid.run",
    operations=(
        OperationSpec(
            "init",
            "Initialize a Gradle build in the directory",
            args=("init", "--type", "basic", "--dsl", "kotlin"),
            params=(_site(required=True),),
        ),
        OperationSpec("build", "Build the site", args=("orchidBuild",), kind="build", params=(_site(),)),
        OperationSpec(
            "serve",
            "Serve the site with live rebuild",
            args=("orchidServe",),
            kind="serve",
            params=(_site(), _port("-PorchidPort=", 8080)),
        ),
        OperationSpec(
            "deploy",
            "Deploy the site using the configured publishers",
            args=("orchidDeploy",),
            params=(_site(), _bool("dry_run", "-PorchidDryDeploy=true", "Only report what would be deployed")),
        ),
        OperationSpec("clean", "Remove build output", args=("clean",), params=(_site(),)),
    ),
)

PUBLISH = AdapterSpec(
    name="publish",
    display_name="Publish",
    language="Swift",
    description="Static site generator for Swift developers",
    binary="publish",
    version_args=("help",),
    homepage="https://github.com/JohnSundell/Publish",
    operations=(
        OperationSpec("init", "Set up a new website package", args=("new",), params=(_site(required=True),)),
        OperationSpec("build", "Generate the website", args=("generate",), kind="build", params=(_site(),)),
        OperationSpec("serve", "Generate and serve the website", args=("run",), kind="serve", params=(_site(),)),
        OperationSpec("deploy", "Generate and deploy the website", args=("deploy",), params=(_site(),)),
        OperationSpec(
            "version",
            "Show Publish CLI usage (the CLI has no version flag)",
            args=("help",),
        ),
    ),
)

YOCAML = AdapterSpec(
    name="yocaml",
    display_name="YOCaml",
    language="OCaml",
    description="Static site generator framework written in OCaml, built with dune",
    binary="dune",
    homepage="https://github.com/xhtmlboi/yocaml",
    operations=(
        OperationSpec(
            "init",
            "Initialize a dune project for the site",
            args=("init", "project"),
            params=(_site(), ParamSpec("name", description="Project name", required=True, positional=True)),
        ),
        OperationSpec("build", "Build the site generator and its rules", args=("build",), kind="build", params=(_site(),)),
        OperationSpec(
            "serve",
            "Run the site generator's watch executable",
            args=("exec", "bin/watch.exe"),
            kind="serve",
            params=(_site(),),
        ),
        OperationSpec("test", "Run the project's tests", args=("test",), params=(_site(),)),
        OperationSpec("clean", "Remove the _build directory", args=("clean",), params=(_site(),)),
    ),
)

ZOTONIC = AdapterSpec(
    name="zotonic",
    display_name="Zotonic",
    language="Erlang",
    description="Erlang web framework and CMS with static publishing",
    binary="zotonic",
    homepage="https://zotonic.com",
    operations=(
        OperationSpec(
            "init",
            "Add a new site from a skeleton",
            args=("addsite",),
            params=(
                ParamSpec("skeleton", description="Site skeleton", default="blog", flag="-s"),
                ParamSpec("name", description="Site name", required=True, positional=True),
            ),
        ),
        OperationSpec("build", "Compile Zotonic and its sites", args=("compile",), kind="build"),
        OperationSpec("serve", "Start Zotonic in the background", args=("start",), kind="serve"),
        OperationSpec("stop", "Stop the running Zotonic node", args=("stop",)),
        OperationSpec("status", "Show status of the running sites", args=("status",)),
    ),
)

MARMOT = AdapterSpec(
    name="marmot",
    display_name="Marmot",
    language="Crystal",
    description="Small static site generator written in Crystal",
    binary="marmot",
    homepage="https://github.com/crystal-community",
    operations=(
        OperationSpec("init", "Create a new site", args=("init",), params=(_new_dir(),)),
        OperationSpec(
            "build",
            "Build the site",
            args=("build",),
            kind="build",
            params=(_site(), _output("--output")),
        ),
        OperationSpec(
            "serve",
            "Serve the site locally",
            args=("serve",),
            kind="serve",
            params=(_site(), _port("--port", 8000)),
        ),
        OperationSpec("clean", "Remove generated output", args=("clean",), params=(_site(),)),
    ),
)

WUB = AdapterSpec(
    name="wub",
    display_name="Wub",
    language="Tcl",
    description="Pure-Tcl web server and site toolkit",
    binary="wub",
    homepage="https://wiki.tcl-lang.org/page/Wub",
    operations=(
        OperationSpec("init", "Create a new site layout", args=("init",), params=(_new_dir(),)),
        OperationSpec(
            "build",
            "Render the site to static files",
            args=("build",),
            kind="build",
            params=(_site(), _output("--output")),
        ),
        OperationSpec(
            "serve",
            "Run the Wub server on the site",
            args=("serve",),
            kind="serve",
            params=(_site(), _port("--port", 8080)),
        ),
        OperationSpec("clean", "Remove rendered output", args=("clean",), params=(_site(),)),
    ),
)

NIMIB = AdapterSpec(
    name="nimib",
    display_name="nimibook",
    language="Nim",
    description="Books and documentation from nimib notebooks",
    binary="nim",
    homepage="https://github.com/pietroppeter/nimibook",
    operations=(
        OperationSpec(
            "init",
            "Initialize the book from nbook.nim",
            args=("r", "nbook.nim", "init"),
            params=(_site(required=True),),
        ),
        OperationSpec(
            "build",
            "Build the book",
            args=("r", "nbook.nim", "build"),
            kind="build",
            params=(_site(),),
        ),
        OperationSpec("check", "Type-check the book script", args=("check", "nbook.nim"), params=(_site(),)),
        OperationSpec("dump", "Dump the book configuration", args=("r", "nbook.nim", "dump"), params=(_site(),)),
    ),
)

ELMSTATIC = AdapterSpec(
    name="elmstatic",
    display_name="Elmstatic",
    language="Elm",
    description="Elm-to-HTML static site generator",
    binary="elmstatic",
    homepage="https://github.com/alexkorban/elmstatic",
    operations=(
        OperationSpec("init", "Scaffold a new Elmstatic site", args=("init",), params=(_site(required=True),)),
        OperationSpec("build", "Generate the site", args=("build",), kind="build", params=(_site(),)),
        OperationSpec("watch", "Rebuild the site on changes", args=("watch",), kind="serve", params=(_site(),)),
        OperationSpec(
            "draft",
            "Generate the site including draft posts",
            args=("draft",),
            kind="build",
            params=(_site(),),
        ),
    ),
)


CATALOG: tuple[AdapterSpec, ...] = (
    # Rust
    ZOLA,
    COBALT,
    MDBOOK,
    # Haskell
    HAKYLL,
    EMA,
    # Elixir
    SERUM,
    TABLEAU,
    NIMBLE_PUBLISHER,
    # Clojure
    CRYOGEN,
    PERUN,
    BABASHKA,
    # Julia
    FRANKLIN,
    DOCUMENTER,
    STATICWEBPAGES,
    # Scala
    LAIKA,
    SCALATEX,
    # Racket
    FROG,
    POLLEN,
    # Other ecosystems
    COLESLAW,
    FORNAX,
    ORCHID,
    PUBLISH,
    YOCAML,
    ZOTONIC,
    MARMOT,
    WUB,
    NIMIB,
    ELMSTATIC,
)


def catalog_by_name() -> dict[str, AdapterSpec]:
    """Map adapter name to spec for the built-in catalogue."""
    return {spec.name: spec for spec in CATALOG}
