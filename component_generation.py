import streamlit.components.v1 as components
import tempfile
import os

# --- Component Generation Function ---
def generate_component(name, template="", script=""):
    """
    Declares a bidirectional Streamlit component from CSS/HTML and JS strings.

    The page is written to ``<tmp>/<name>/index.html``. Its script receives
    ``component_data`` on every render and reports user actions back to Python
    with ``emitEvent(payload)``, which adds a unique ``event_id`` so the same
    click is never applied twice across reruns.
    """
    component_dir = os.path.join(tempfile.gettempdir(), name)
    os.makedirs(component_dir, exist_ok=True)
    page = f"""
        <!DOCTYPE html>
        <html lang="en">
        <head>
            <link href='https://fonts.googleapis.com/css?family=Inter:400,500,600,700' rel='stylesheet'>
            <meta charset="UTF-8" />
            <meta name="viewport" content="width=device-width, initial-scale=1.0">
            <title>{name}</title>
            <script>
                // --- Streamlit Communication Boilerplate ---
                function sendMessageToStreamlitClient(type, data) {{
                    const outData = Object.assign({{
                        isStreamlitMessage: true,
                        type: type,
                    }}, data);
                    window.parent.postMessage(outData, "*");
                }}

                const Streamlit = {{
                    setComponentReady: function() {{
                        sendMessageToStreamlitClient("streamlit:componentReady", {{apiVersion: 1}});
                    }},
                    setFrameHeight: function(height) {{
                        sendMessageToStreamlitClient("streamlit:setFrameHeight", {{height: height}});
                    }},
                    setComponentValue: function(value) {{
                        sendMessageToStreamlitClient("streamlit:setComponentValue", {{value: value, dataType: "json"}});
                    }},
                    RENDER_EVENT: "streamlit:render",
                    events: {{
                        addEventListener: function(type, callback) {{
                            window.addEventListener("message", function(event) {{
                                if (event.data.type === type) {{
                                    event.detail = event.data
                                    callback(event);
                                }}
                            }});
                        }}
                    }}
                }}

                // Each user action is reported once, stamped with a unique id
                let emittedEventCount = 0;
                function emitEvent(payload) {{
                    emittedEventCount += 1;
                    Streamlit.setComponentValue(Object.assign({{
                        event_id: `${{Date.now()}}-${{emittedEventCount}}`,
                    }}, payload));
                }}
                // --- End Streamlit Boilerplate ---
            </script>
            {template}
        </head>
        <body>
            <div id="component-root"></div>
        </body>
        <script>
            {script}
        </script>
        </html>
    """
    fname = os.path.join(component_dir, "index.html")
    with open(fname, 'w', encoding='utf-8') as f:
        f.write(page)

    _component_func = components.declare_component(name, path=component_dir)

    def component_wrapper(component_data, key=None, default=None):
        return _component_func(component_data=component_data, key=key, default=default)
    return component_wrapper
