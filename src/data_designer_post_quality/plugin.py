from data_designer.plugins.plugin import Plugin, PluginType

post_quality_plugin = Plugin(
    config_qualified_name="data_designer_post_quality.config.PostQualityColumnConfig",
    impl_qualified_name="data_designer_post_quality.generator.PostQualityColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
