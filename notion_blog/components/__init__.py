from .giscus import giscus_loader_script, giscus_props, render_giscus_comments

__all__ = ["giscus_loader_script", "giscus_props", "render_giscus_comments"]
