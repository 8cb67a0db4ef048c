"""构建期生成的应用配置"""
