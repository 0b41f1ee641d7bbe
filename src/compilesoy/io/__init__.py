from compilesoy.io.output import JsFileWriter, StdoutWriter, js_output_path

__all__ = ['JsFileWriter', 'StdoutWriter', 'js_output_path']
