version = "0.0.0"  # this should be overwritten by setuptools_scm
