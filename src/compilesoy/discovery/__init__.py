from compilesoy.discovery.file_discovery import TemplateFileFinder, find_soy_files

__all__ = ['TemplateFileFinder', 'find_soy_files']
