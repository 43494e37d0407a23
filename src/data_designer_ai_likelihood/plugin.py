from data_designer.plugins.plugin import Plugin, PluginType

ai_likelihood_plugin = Plugin(
    config_qualified_name="data_designer_ai_likelihood.config.AILikelihoodColumnConfig",
    impl_qualified_name="data_designer_ai_likelihood.generator.AILikelihoodColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
