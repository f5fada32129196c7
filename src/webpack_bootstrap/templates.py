from __future__ import annotations

from dataclasses import dataclass

from webpack_bootstrap.config import Variant

BOTH = (Variant.BASIC, Variant.JEST)
JEST_ONLY = (Variant.JEST,)


@dataclass(frozen=True)
class DependencyGroup:
    label: str
    packages: tuple[str, ...]
    variants: tuple[Variant, ...] = BOTH


@dataclass(frozen=True)
class StarterFile:
    relative_path: str
    content: str
    description: str
    variants: tuple[Variant, ...] = BOTH


DEPENDENCY_GROUPS = (
    DependencyGroup("Webpack core packages", ("webpack", "webpack-cli")),
    DependencyGroup("Webpack plugins", ("html-webpack-plugin",)),
    DependencyGroup("Webpack loaders", ("style-loader", "css-loader", "html-loader")),
    DependencyGroup("development server", ("webpack-dev-server",)),
    DependencyGroup("jest and babel", ("jest", "@babel/preset-env", "babel-jest"), JEST_ONLY),
)

WEBPACK_SCRIPTS = {
    "build": "webpack --mode production",
    "dev": "webpack serve --mode development --open",
    "start": "webpack serve --mode development",
    "watch": "webpack --mode development --watch",
}

JEST_SCRIPTS = {
    "test": "jest",
    "test:watch": "jest --watch",
    "test:watchAll": "jest --watchAll",
    "test:coverage": "jest --coverage",
}

TEMPLATE_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Webpack App</title>
</head>
<body>
    <div id="app">
        <h1>Welcome to Webpack!</h1>
        <p>Your webpack setup is ready to go.</p>
    </div>
</body>
</html>
"""

INDEX_JS = """\
// Main entry point for your application
console.log('Webpack is working!');

// You can import CSS files here
// import './styles.css';

// Add your application code here
document.addEventListener('DOMContentLoaded', function() {
    console.log('DOM loaded and ready!');
});
"""

SUM_JS = """\
// Sum function
function sum(a, b) {
    return a + b;
}
module.exports = sum;
"""

SUM_TEST_JS = """\
const sum = require('../src/sum.js');

// Sum function test
test('sum', () => {
    expect(sum(1, 2)).toBe(3);
});
"""

# Blank lines carry two spaces in the generated file; kept as explicit
# segments so editors do not strip them.
_JEST_BLANK = "  "

JEST_CONFIG_JS = "\n".join((
    "module.exports = {",
    "  // Test environment",
    "  testEnvironment: 'node',",
    _JEST_BLANK,
    "  // Test file patterns",
    "  testMatch: [",
    "    '**/tests/**/*.test.js',",
    "    '**/tests/**/*.spec.js'",
    "  ],",
    _JEST_BLANK,
    "  // Setup files",
    "  setupFilesAfterEnv: [],",
    _JEST_BLANK,
    "  // Coverage configuration",
    "  collectCoverage: false,",
    "  collectCoverageFrom: [",
    "    'src/**/*.js',",
    "    '!src/**/*.test.js',",
    "    '!src/**/*.spec.js'",
    "  ],",
    _JEST_BLANK,
    "  // Coverage directories to ignore",
    "  coveragePathIgnorePatterns: [",
    "    '/node_modules/',",
    "    '/tests/',",
    "    '/dist/'",
    "  ],",
    _JEST_BLANK,
    "  // Transform files",
    "  transform: {",
    r"    '^.+\\.js$': 'babel-jest'",
    "  },",
    _JEST_BLANK,
    "  // Module file extensions",
    "  moduleFileExtensions: ['js', 'json', 'jsx', 'ts', 'tsx', 'node']",
    "};",
    "",
))

STARTER_FILES = (
    StarterFile("src/template.html", TEMPLATE_HTML, "HTML template"),
    StarterFile("src/index.js", INDEX_JS, "main entry point"),
    StarterFile("src/sum.js", SUM_JS, "sample module", JEST_ONLY),
    StarterFile("tests/sum.test.js", SUM_TEST_JS, "sample test file", JEST_ONLY),
    StarterFile("jest.config.js", JEST_CONFIG_JS, "Jest configuration", JEST_ONLY),
)


def dependency_groups(variant: Variant) -> list[DependencyGroup]:
    return [g for g in DEPENDENCY_GROUPS if variant in g.variants]


def starter_files(variant: Variant) -> list[StarterFile]:
    return [f for f in STARTER_FILES if variant in f.variants]


def run_scripts(variant: Variant) -> dict[str, str]:
    scripts = dict(WEBPACK_SCRIPTS)
    if variant is Variant.JEST:
        scripts.update(JEST_SCRIPTS)
    return scripts
