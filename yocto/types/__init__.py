"""Runtime value types for Yocto: names, nil, functions, macros, environments."""
