"""Reading, merging, writing and removing cluster entries in kubeconfig files."""