'''Bundled auxiliary code, executed into target namespaces by the bridge'''
