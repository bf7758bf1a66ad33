import os
import pathlib
import sys

from setuptools import extension as setuptools_ext
from setuptools import setup
from setuptools.command import build_ext as setuptools_build_ext


_ROOT = pathlib.Path(__file__).parent


with open(str(_ROOT / "README.rst")) as f:
    readme = f.read()


with open(str(_ROOT / "rdparse" / "_version.py")) as f:
    for line in f:
        if line.startswith("__version__ ="):
            _, _, version = line.partition("=")
            VERSION = version.strip(" \n'\"")
            break
    else:
        raise RuntimeError(
            "unable to read the version from rdparse/_version.py"
        )


USE_MYPYC = False
MYPY_DEPENDENCY = "mypy>=0.910"
PACKAGING_DEPENDENCY = "packaging"
setup_requires = []
ext_modules = []

if (
    os.environ.get("RDPARSE_USE_MYPYC", None) in {"true", "1", "on"}
    or "--use-mypyc" in sys.argv
):
    if "--use-mypyc" in sys.argv:
        sys.argv.remove("--use-mypyc")
    setup_requires.append(MYPY_DEPENDENCY)
    setup_requires.append(PACKAGING_DEPENDENCY)
    # Fool setuptools into calling build_ext.  The actual list of
    # extensions would get replaced by mypycify.
    ext_modules.append(
        setuptools_ext.Extension("rdparse.foo", ["rdparse/foo.c"])
    )
    USE_MYPYC = True


class build_ext(setuptools_build_ext.build_ext):  # type: ignore
    def finalize_options(self) -> None:
        # finalize_options() may be called multiple times on the
        # same command object, so make sure not to override previously
        # set options.
        if getattr(self, "_initialized", False):
            return

        if USE_MYPYC:
            from packaging.requirements import Requirement

            try:
                import mypy.version
                from mypyc.build import mypycify
            except ImportError:
                raise RuntimeError(
                    "please install {} to compile rdparse from source".format(
                        MYPY_DEPENDENCY
                    )
                )

            mypy_dep = Requirement(MYPY_DEPENDENCY)
            if mypy.version.__version__ not in mypy_dep.specifier:
                raise RuntimeError(
                    "rdparse requires {}, got mypy=={}".format(
                        MYPY_DEPENDENCY, mypy.version.__version__
                    )
                )

            self.distribution.ext_modules = mypycify(
                [
                    "rdparse/cursor.py",
                    "rdparse/result.py",
                ],
            )

        super(build_ext, self).finalize_options()


setup(
    name="rdparse",
    version=VERSION,
    python_requires=">=3.9.0",
    license="MIT",
    description="A backtracking parser-combinator engine for writing "
    "recursive-descent parsers as compositions of rules.",
    long_description=readme,
    long_description_content_type="text/x-rst",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Compilers",
        "Topic :: Text Processing :: General",
    ],
    packages=["rdparse", "rdparse.tests", "rdparse.tests.grammars"],
    package_data={"rdparse": ["py.typed"]},
    install_requires=["mypy_extensions>=0.4.3"],
    setup_requires=setup_requires,
    ext_modules=ext_modules,
    extras_require={
        "test": [
            "flake8",
            MYPY_DEPENDENCY,
        ]
    },
    cmdclass={"build_ext": build_ext},
)
