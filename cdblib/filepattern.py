from wcmatch import glob


def fnmatch(name, pattern):
    """
    glob match on '/' separated workspace paths, '**' crosses directories
    """
    return glob.globmatch(name, pattern, flags=glob.GLOBSTAR | glob.EXTGLOB | glob.DOTMATCH)


def matches_any(name, patterns):
    return any(fnmatch(name, pattern) for pattern in patterns)
