"""Two-factor helpers: recovery codes and form payload checks."""