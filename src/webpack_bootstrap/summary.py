from __future__ import annotations

from webpack_bootstrap.bootstrap import SetupReport
from webpack_bootstrap.config import Variant
from webpack_bootstrap.templates import starter_files

STRUCTURE = {
    "src": "source files",
    "tests": "test files",
    "dist": "build output",
}

COMMANDS = (
    ("npm run dev", "Start development server", Variant.BASIC),
    ("npm run build", "Build for production", Variant.BASIC),
    ("npm run watch", "Build and watch for changes", Variant.BASIC),
    ("npm test", "Run tests once", Variant.JEST),
    ("npm run test:watch", "Run tests in watch mode", Variant.JEST),
    ("npm run test:watchAll", "Run all tests in watch mode", Variant.JEST),
    ("npm run test:coverage", "Run tests with coverage report", Variant.JEST),
)

# Longer commands (test:watchAll, test:coverage) overflow the column unpadded.
COMMAND_WIDTH = 19


def _bullets(items) -> list[str]:
    return [f"   • {item}" for item in items]


def format_summary(report: SetupReport, variant: Variant) -> str:
    """Human-readable recap printed at the end of a successful run."""
    lines = ["", "🎉 Webpack setup complete!", "", "📋 Installed packages:"]
    lines += _bullets([
        "webpack & webpack-cli",
        "html-webpack-plugin",
        "style-loader & css-loader",
        "html-loader",
        "webpack-dev-server",
    ])
    if variant is Variant.JEST:
        lines += _bullets(["jest, @babel/preset-env & babel-jest"])

    lines += ["", "📁 Project structure created:"]
    lines += _bullets(
        f"{path.name}/ ({STRUCTURE[path.name]})" for path, _ in report.directories
    )
    lines += _bullets(
        f"{f.relative_path} ({f.description})" for f in starter_files(variant)
    )

    commands = [
        (cmd, text) for cmd, text, needs in COMMANDS
        if needs is Variant.BASIC or variant is Variant.JEST
    ]
    lines += ["", "🚀 Available commands:"]
    lines += _bullets(f"{cmd:<{COMMAND_WIDTH}} - {text}" for cmd, text in commands)

    steps = ["Add your CSS files to src/", "Import them in src/index.js"]
    if variant is Variant.JEST:
        steps.append("Add your test files to tests/")
    steps.append("Run 'npm run dev' to start developing")
    if variant is Variant.JEST:
        steps.append("Run 'npm test' to run your tests")
    lines += ["", "💡 Next steps:"]
    lines += [f"   {i}. {step}" for i, step in enumerate(steps, start=1)]

    lines += ["", "Happy coding! 🎯"]
    return "\n".join(lines)
