"""Node naming, free ports, proxy settings, node images and cgroup readiness checks."""